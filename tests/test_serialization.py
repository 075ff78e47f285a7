"""Tests for sink serialization helpers."""

from datetime import date, datetime
from decimal import Decimal

from propfolio.calculations.taxes import get_ssd_countdown
from propfolio.models import PropertyRecord, PropertyType
from propfolio.sinks.serialization import dataclass_to_dict, serialize_value, to_dict


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("12.50")) == "12.50"

    def test_enum(self) -> None:
        assert serialize_value(PropertyType.HDB) == "HDB"

    def test_dates(self) -> None:
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"
        assert serialize_value(datetime(2024, 6, 15, 9, 30)) == "2024-06-15T09:30:00"

    def test_collections(self) -> None:
        assert serialize_value((1, date(2024, 1, 1))) == [1, "2024-01-01"]
        assert serialize_value(frozenset({30, 7, 1})) == [1, 7, 30]
        assert serialize_value({"d": date(2024, 1, 1)}) == {"d": "2024-01-01"}

    def test_floats_rounded_to_cents(self) -> None:
        assert serialize_value(1234.5678) == 1234.57
        assert serialize_value(1.5) == 1.5

    def test_passthrough(self) -> None:
        assert serialize_value(None) is None
        assert serialize_value(True) is True
        assert serialize_value(12) == 12
        assert serialize_value("HDB") == "HDB"

    def test_nested_dataclass_in_list(self, as_of: date) -> None:
        data = serialize_value([get_ssd_countdown(date(2022, 6, 15), as_of)])
        assert data[0]["days_to_next_tier"] == 364


class TestToDict:
    """Tests for to_dict."""

    def test_property(self, sample_property: PropertyRecord) -> None:
        data = to_dict(sample_property)

        assert data["property_id"] == "prop-test-001"
        assert data["purchase_date"] == "2022-06-15"
        assert data["property_type"] == "Condo"

    def test_nested_dataclass(self, as_of: date) -> None:
        data = dataclass_to_dict(get_ssd_countdown(date(2022, 6, 15), as_of))

        assert data["current_rate"] == 4
        assert data["is_exempt"] is False

    def test_dict(self) -> None:
        assert to_dict({"when": date(2024, 1, 1)}) == {"when": "2024-01-01"}

    def test_other(self) -> None:
        assert to_dict(42) == {"value": "42"}
