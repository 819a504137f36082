# brewery_api/core/exceptions.py
"""
Domain errors raised by the crud layer and the routers.

The API layer translates them into HTTP responses (see api/v1/errors.py):
ValidationError -> 400, NotFoundError -> 404. Anything else coming out of
the store is left alone and ends up as a 500.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ValidationError(Exception):
    """One or more fields of a payload break a constraint."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


class NotFoundError(Exception):
    """The operation targets an id that is not in the store."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} not found.")
