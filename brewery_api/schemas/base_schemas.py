from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class DTOBase(BaseModel):
    """
    Common config for the resource DTOs.

    JSON uses camelCase (``customerName``) but snake_case is accepted on input.
    Every field is optional here; which ones are required is decided by the crud
    layer, and ``model_fields_set`` tells an omitted field from an explicit one.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("created_date", "last_modified_date", check_fields=False)
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        # naive timestamps from clients are taken as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
