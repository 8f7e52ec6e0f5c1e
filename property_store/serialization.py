"""Rendering of models in the UI (camelCase) dictionary shape."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

# snake_case attribute -> UI key, where they differ
UI_KEYS = {
    "square_feet": "squareFeet",
    "zip_code": "zipCode",
    "year_built": "yearBuilt",
    "listing_date": "listingDate",
}


def to_ui_dict(obj: Any) -> dict:
    """Convert a model to the UI dictionary shape.

    A Property's ``id`` is rendered as ``Id``, the key the UI uses for
    store-assigned primary keys.
    """
    if is_dataclass(obj):
        result = {}
        for f in fields(obj):
            key = "Id" if f.name == "id" else UI_KEYS.get(f.name, f.name)
            result[key] = serialize_value(getattr(obj, f.name))
        return result
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_ui_dict(value)
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
