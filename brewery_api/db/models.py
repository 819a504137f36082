# brewery_api/db/models.py
"""
Stored form of the two resources.

These are what the store adapters persist; the API never sees them
directly, it works with the DTOs in brewery_api/schemas.
"""
from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel


class Customer(BaseModel):
    COLLECTION: ClassVar[str] = "customer"

    id: str | None = None
    customer_name: str
    created_date: datetime
    last_modified_date: datetime


class Beer(BaseModel):
    COLLECTION: ClassVar[str] = "beer"

    id: str | None = None
    beer_name: str
    beer_style: str
    upc: str  # not unique, the seed data has two beers sharing one
    price: Decimal
    quantity_on_hand: int | None = None
    created_date: datetime
    last_modified_date: datetime
