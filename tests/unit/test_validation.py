"""Unit tests for the shared field checks and helpers of the crud layer."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from brewery_api.core.exceptions import ValidationError
from brewery_api.crud.common import creation_timestamps, supplied_values
from brewery_api.crud.validation import (
    non_negative,
    raise_for_errors,
    require_id,
    required_text,
    required_value,
)
from brewery_api.schemas.beer_schemas import BeerDTO
from brewery_api.schemas.customer_schemas import CustomerDTO

pytestmark = pytest.mark.unit


class TestFieldChecks:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required_text_rejects_blank(self, value):
        error = required_text("customerName", value)
        assert error.field == "customerName"
        assert error.message == "must not be blank"

    def test_required_text_accepts_text(self):
        assert required_text("customerName", " x ") is None

    def test_required_value(self):
        assert required_value("price", None).field == "price"
        assert required_value("price", Decimal("0")) is None

    def test_non_negative(self):
        assert non_negative("price", Decimal("-0.01")).field == "price"
        assert non_negative("price", Decimal("0")) is None
        assert non_negative("quantityOnHand", None) is None

    def test_raise_for_errors_collects_every_field(self):
        with pytest.raises(ValidationError) as exc_info:
            raise_for_errors(
                required_text("beerName", ""),
                required_text("beerStyle", "IPA"),
                non_negative("price", Decimal("-1")),
            )
        assert exc_info.value.fields == ["beerName", "price"]

    def test_raise_for_errors_passes(self):
        raise_for_errors(None, None)

    @pytest.mark.parametrize("value", ["", "  ", None])
    def test_require_id_rejects_blank(self, value):
        with pytest.raises(ValidationError, match="id"):
            require_id(value)


class TestCreationTimestamps:
    def test_unset_gives_equal_timestamps(self):
        created, modified = creation_timestamps(None, None)
        assert created == modified
        assert created.tzinfo is not None

    def test_supplied_values_kept(self):
        created_in = datetime(2024, 1, 1, tzinfo=timezone.utc)
        modified_in = created_in + timedelta(days=1)
        assert creation_timestamps(created_in, modified_in) == (created_in, modified_in)

    def test_modified_never_before_created(self):
        created_in = datetime(2024, 1, 2, tzinfo=timezone.utc)
        created, modified = creation_timestamps(created_in, created_in - timedelta(days=1))
        assert modified == created


class TestSuppliedValues:
    def test_only_explicit_non_blank_fields(self):
        dto = CustomerDTO.model_validate({"customerName": "New"})
        assert supplied_values(dto, ("customer_name",)) == {"customer_name": "New"}

    def test_blank_and_null_are_ignored(self):
        dto = BeerDTO.model_validate({"beerName": " ", "upc": None, "quantityOnHand": 0})
        assert supplied_values(dto, ("beer_name", "upc", "quantity_on_hand")) == {"quantity_on_hand": 0}

    def test_nothing_supplied(self):
        assert supplied_values(BeerDTO(), ("beer_name", "price")) == {}
