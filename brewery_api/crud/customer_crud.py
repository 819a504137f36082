# brewery_api/crud/customer_crud.py
from brewery_api.core.logging import get_logger
from brewery_api.crud.common import creation_timestamps, supplied_values, touched
from brewery_api.crud.validation import raise_for_errors, require_id, required_text
from brewery_api.db.models import Customer
from brewery_api.db.store import EntityStore
from brewery_api.schemas.customer_schemas import CustomerDTO

logger = get_logger(__name__)

MUTABLE_FIELDS = ("customer_name",)


def validate_customer(customer_in: CustomerDTO) -> None:
    raise_for_errors(required_text("customerName", customer_in.customer_name))


async def list_customers(store: EntityStore[Customer]) -> list[CustomerDTO]:
    return [CustomerDTO.from_entity(customer) for customer in await store.find_all()]


async def get_customer_by_id(store: EntityStore[Customer], customer_id: str) -> CustomerDTO | None:
    """Returns None when no customer has this id."""
    customer = await store.find_by_id(require_id(customer_id))
    return CustomerDTO.from_entity(customer) if customer is not None else None


async def create_customer(store: EntityStore[Customer], customer_in: CustomerDTO) -> CustomerDTO:
    """
    Validates and persists a new customer. Any id in the payload is ignored,
    the store assigns one.
    """
    validate_customer(customer_in)
    created, modified = creation_timestamps(customer_in.created_date, customer_in.last_modified_date)
    customer = await store.save(Customer(
        customer_name=customer_in.customer_name,
        created_date=created,
        last_modified_date=modified,
    ))
    logger.info("Created customer %s", customer.id)
    return CustomerDTO.from_entity(customer)


async def update_customer(store: EntityStore[Customer], customer_id: str, customer_in: CustomerDTO) -> CustomerDTO | None:
    """
    Full replace of the mutable fields. id and createdDate are kept.
    Returns None if the customer does not exist.
    """
    db_customer = await store.find_by_id(require_id(customer_id))
    if db_customer is None:
        return None
    validate_customer(customer_in)

    customer = await store.save(Customer(
        id=db_customer.id,
        customer_name=customer_in.customer_name,
        created_date=db_customer.created_date,
        last_modified_date=touched(db_customer.created_date),
    ))
    logger.info("Updated customer %s", customer.id)
    return CustomerDTO.from_entity(customer)


async def patch_customer(store: EntityStore[Customer], customer_id: str, customer_in: CustomerDTO) -> CustomerDTO | None:
    """
    Partial update: only fields sent with a non-blank value are applied.
    Returns None if the customer does not exist.
    """
    db_customer = await store.find_by_id(require_id(customer_id))
    if db_customer is None:
        return None

    update_data = supplied_values(customer_in, MUTABLE_FIELDS)
    update_data["last_modified_date"] = touched(db_customer.created_date)
    customer = await store.save(db_customer.model_copy(update=update_data))
    logger.info("Patched customer %s (%s)", customer.id, ", ".join(sorted(update_data)))
    return CustomerDTO.from_entity(customer)


async def delete_customer(store: EntityStore[Customer], customer_id: str) -> bool:
    """True if the customer existed and was removed."""
    if await store.find_by_id(require_id(customer_id)) is None:
        return False
    await store.delete_by_id(customer_id)
    logger.info("Deleted customer %s", customer_id)
    return True
