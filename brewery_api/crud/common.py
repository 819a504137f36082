# brewery_api/crud/common.py
from datetime import datetime, timezone

from pydantic import BaseModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def creation_timestamps(created: datetime | None, modified: datetime | None) -> tuple[datetime, datetime]:
    """
    Timestamps for a new record. Values supplied by the client are kept when set,
    otherwise both are "now". lastModifiedDate never precedes createdDate.
    """
    now = utcnow()
    created = created or now
    modified = modified or created
    return created, max(created, modified)


def touched(created: datetime) -> datetime:
    """lastModifiedDate for a record being changed right now."""
    return max(utcnow(), created)


def supplied_values(payload: BaseModel, fields: tuple[str, ...]) -> dict:
    """
    The subset of ``fields`` the client explicitly sent with a usable value:
    omitted, null and blank-string fields are left out.
    """
    supplied = payload.model_dump(include=set(fields), exclude_unset=True, exclude_none=True)
    return {
        key: value for key, value in supplied.items()
        if not (isinstance(value, str) and not value.strip())
    }
