from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from brewery_api.db.models import Beer
from brewery_api.schemas.base_schemas import DTOBase

# pydantic renders Decimal as a string in JSON; clients expect a number.
# Going through float means prices beyond ~15 significant digits come out rounded
# in responses; the stored Decimal keeps its exact value.
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class BeerDTO(DTOBase):
    id: str | None = None
    beer_name: str | None = None
    beer_style: str | None = None
    upc: str | None = Field(None, description="Universal product code. Not unique.")
    price: Price | None = None
    quantity_on_hand: int | None = None
    created_date: datetime | None = None
    last_modified_date: datetime | None = None

    @classmethod
    def from_entity(cls, beer: Beer) -> "BeerDTO":
        return cls.model_validate(beer.model_dump())
