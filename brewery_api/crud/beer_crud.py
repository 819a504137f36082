# brewery_api/crud/beer_crud.py
from brewery_api.core.logging import get_logger
from brewery_api.crud.common import creation_timestamps, supplied_values, touched
from brewery_api.crud.validation import non_negative, raise_for_errors, require_id, required_text, required_value
from brewery_api.db.models import Beer
from brewery_api.db.store import EntityStore
from brewery_api.schemas.beer_schemas import BeerDTO

logger = get_logger(__name__)

MUTABLE_FIELDS = ("beer_name", "beer_style", "upc", "price", "quantity_on_hand")


def validate_beer(beer_in: BeerDTO) -> None:
    raise_for_errors(
        required_text("beerName", beer_in.beer_name),
        required_text("beerStyle", beer_in.beer_style),
        required_text("upc", beer_in.upc),
        required_value("price", beer_in.price),
        non_negative("price", beer_in.price),
        non_negative("quantityOnHand", beer_in.quantity_on_hand),
    )


async def list_beers(store: EntityStore[Beer]) -> list[BeerDTO]:
    return [BeerDTO.from_entity(beer) for beer in await store.find_all()]


async def get_beer_by_id(store: EntityStore[Beer], beer_id: str) -> BeerDTO | None:
    beer = await store.find_by_id(require_id(beer_id))
    return BeerDTO.from_entity(beer) if beer is not None else None


async def create_beer(store: EntityStore[Beer], beer_in: BeerDTO) -> BeerDTO:
    validate_beer(beer_in)
    created, modified = creation_timestamps(beer_in.created_date, beer_in.last_modified_date)
    beer = await store.save(Beer(
        **beer_in.model_dump(include=set(MUTABLE_FIELDS)),
        created_date=created,
        last_modified_date=modified,
    ))
    logger.info("Created beer %s", beer.id)
    return BeerDTO.from_entity(beer)


async def update_beer(store: EntityStore[Beer], beer_id: str, beer_in: BeerDTO) -> BeerDTO | None:
    """
    Overwrites every mutable field with the payload's value, including
    quantityOnHand when it is left out. Returns None if the beer does not exist.
    """
    db_beer = await store.find_by_id(require_id(beer_id))
    if db_beer is None:
        return None
    validate_beer(beer_in)

    beer = await store.save(Beer(
        **beer_in.model_dump(include=set(MUTABLE_FIELDS)),
        id=db_beer.id,
        created_date=db_beer.created_date,
        last_modified_date=touched(db_beer.created_date),
    ))
    logger.info("Updated beer %s", beer.id)
    return BeerDTO.from_entity(beer)


async def patch_beer(store: EntityStore[Beer], beer_id: str, beer_in: BeerDTO) -> BeerDTO | None:
    db_beer = await store.find_by_id(require_id(beer_id))
    if db_beer is None:
        return None

    update_data = supplied_values(beer_in, MUTABLE_FIELDS)
    raise_for_errors(
        non_negative("price", update_data.get("price")),
        non_negative("quantityOnHand", update_data.get("quantity_on_hand")),
    )
    update_data["last_modified_date"] = touched(db_beer.created_date)
    beer = await store.save(db_beer.model_copy(update=update_data))
    logger.info("Patched beer %s (%s)", beer.id, ", ".join(sorted(update_data)))
    return BeerDTO.from_entity(beer)


async def delete_beer(store: EntityStore[Beer], beer_id: str) -> bool:
    if await store.find_by_id(require_id(beer_id)) is None:
        return False
    await store.delete_by_id(beer_id)
    logger.info("Deleted beer %s", beer_id)
    return True
