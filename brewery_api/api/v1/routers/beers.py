# brewery_api/api/v1/routers/beers.py
from fastapi import APIRouter, Depends, Request, Response, status
from typing import List

from brewery_api.core.exceptions import NotFoundError
from brewery_api.crud import beer_crud
from brewery_api.db.models import Beer
from brewery_api.db.session import get_beer_store
from brewery_api.db.store import EntityStore
from brewery_api.schemas.beer_schemas import BeerDTO
from brewery_api.utils.decorators import log_request

router = APIRouter()


@router.get("", response_model=List[BeerDTO])
@log_request
async def list_beers(store: EntityStore[Beer] = Depends(get_beer_store)):
    return await beer_crud.list_beers(store)


@router.get("/{beer_id}", response_model=BeerDTO)
@log_request
async def get_beer(beer_id: str, store: EntityStore[Beer] = Depends(get_beer_store)):
    beer = await beer_crud.get_beer_by_id(store, beer_id)
    if beer is None:
        raise NotFoundError("Beer", beer_id)
    return beer


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
@log_request
async def create_beer(
        payload: BeerDTO,
        request: Request,
        store: EntityStore[Beer] = Depends(get_beer_store),
):
    beer = await beer_crud.create_beer(store, payload)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{request.url.path.rstrip('/')}/{beer.id}"},
    )


@router.put("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@log_request
async def update_beer(beer_id: str, payload: BeerDTO, store: EntityStore[Beer] = Depends(get_beer_store)):
    if await beer_crud.update_beer(store, beer_id, payload) is None:
        raise NotFoundError("Beer", beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@log_request
async def patch_beer(beer_id: str, payload: BeerDTO, store: EntityStore[Beer] = Depends(get_beer_store)):
    if await beer_crud.patch_beer(store, beer_id, payload) is None:
        raise NotFoundError("Beer", beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@log_request
async def delete_beer(beer_id: str, store: EntityStore[Beer] = Depends(get_beer_store)):
    if not await beer_crud.delete_beer(store, beer_id):
        raise NotFoundError("Beer", beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
