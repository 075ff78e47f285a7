"""JSON-ready conversion of models and results for the sinks.

Floats are rounded to cents; dates, enums and sets become their JSON
equivalents. Nested results (scenarios, countdowns) are converted in place.
"""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

FLOAT_PRECISION = 2


def to_dict(obj: Any) -> dict:
    """Convert a dataclass or mapping to a JSON-ready dict."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    if isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass field by field, recursing into nested dataclasses."""
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a single value for JSON output."""
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, float):
        return round(value, FLOAT_PRECISION)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if is_dataclass(value):
        return dataclass_to_dict(value)
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted(serialize_value(v) for v in value)
    return value
