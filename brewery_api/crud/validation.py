# brewery_api/crud/validation.py
"""
Field checks shared by the crud modules.

Each check returns a FieldError or None so that a caller can run all of
them and report every broken field at once through ``raise_for_errors``.
Field names are the external (camelCase) ones so they can be shown to
the client as-is.
"""
from decimal import Decimal

from brewery_api.core.exceptions import FieldError, ValidationError


def required_text(field: str, value: str | None) -> FieldError | None:
    if value is None or not value.strip():
        return FieldError(field, "must not be blank")
    return None


def required_value(field: str, value) -> FieldError | None:
    if value is None:
        return FieldError(field, "must not be null")
    return None


def non_negative(field: str, value: int | Decimal | None) -> FieldError | None:
    if value is not None and value < 0:
        return FieldError(field, "must be greater than or equal to 0")
    return None


def raise_for_errors(*checks: FieldError | None) -> None:
    errors = [error for error in checks if error is not None]
    if errors:
        raise ValidationError(errors)


def require_id(resource_id: str | None) -> str:
    """An empty id is a caller mistake, not a lookup miss."""
    if resource_id is None or not resource_id.strip():
        raise ValidationError([FieldError("id", "must not be blank")])
    return resource_id
