# brewery_api/api/v1/routers/customers.py
from fastapi import APIRouter, Depends, Request, Response, status
from typing import List

from brewery_api.core.exceptions import NotFoundError
from brewery_api.crud import customer_crud
from brewery_api.db.models import Customer
from brewery_api.db.session import get_customer_store
from brewery_api.db.store import EntityStore
from brewery_api.schemas.customer_schemas import CustomerDTO
from brewery_api.utils.decorators import log_request

router = APIRouter()


@router.get("", response_model=List[CustomerDTO])
@log_request
async def list_customers(store: EntityStore[Customer] = Depends(get_customer_store)):
    """List every customer."""
    return await customer_crud.list_customers(store)


@router.get("/{customer_id}", response_model=CustomerDTO)
@log_request
async def get_customer(customer_id: str, store: EntityStore[Customer] = Depends(get_customer_store)):
    customer = await customer_crud.get_customer_by_id(store, customer_id)
    if customer is None:
        raise NotFoundError("Customer", customer_id)
    return customer


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
@log_request
async def create_customer(
        payload: CustomerDTO,
        request: Request,
        store: EntityStore[Customer] = Depends(get_customer_store),
):
    """Create a customer. The new resource's path is returned in the Location header."""
    customer = await customer_crud.create_customer(store, payload)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{request.url.path.rstrip('/')}/{customer.id}"},
    )


@router.put("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@log_request
async def update_customer(
        customer_id: str,
        payload: CustomerDTO,
        store: EntityStore[Customer] = Depends(get_customer_store),
):
    """Replace every field of a customer except its id and createdDate."""
    if await customer_crud.update_customer(store, customer_id, payload) is None:
        raise NotFoundError("Customer", customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@log_request
async def patch_customer(
        customer_id: str,
        payload: CustomerDTO,
        store: EntityStore[Customer] = Depends(get_customer_store),
):
    """Apply only the fields present in the payload."""
    if await customer_crud.patch_customer(store, customer_id, payload) is None:
        raise NotFoundError("Customer", customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@log_request
async def delete_customer(customer_id: str, store: EntityStore[Customer] = Depends(get_customer_store)):
    if not await customer_crud.delete_customer(store, customer_id):
        raise NotFoundError("Customer", customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
