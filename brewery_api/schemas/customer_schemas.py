from datetime import datetime

from pydantic import Field

from brewery_api.db.models import Customer
from brewery_api.schemas.base_schemas import DTOBase


class CustomerDTO(DTOBase):
    id: str | None = None
    customer_name: str | None = Field(None, description="Display name of the customer.")
    created_date: datetime | None = None
    last_modified_date: datetime | None = None

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerDTO":
        return cls.model_validate(customer.model_dump())
