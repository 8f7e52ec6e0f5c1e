"""Translation between Property models and flat, suffix-tagged store records.

Custom fields on the record-store carry a ``_c`` suffix and nested UI
values are flattened (``address.zipCode`` -> ``address_zip_code_c``).
List-valued fields are stored as text: ``images_c`` newline-joined,
``features_c`` comma-joined.
"""

import re
from datetime import datetime, timezone
from typing import Any, Mapping

from property_store.exceptions import CodecError
from property_store.models import Address, Coordinates, Property, PropertyInput

PROPERTY_ENTITY = "property_c"

ID_FIELD = "Id"

PROPERTY_FIELDS: tuple[str, ...] = (
    ID_FIELD,
    "title_c",
    "price_c",
    "type_c",
    "bedrooms_c",
    "bathrooms_c",
    "square_feet_c",
    "address_street_c",
    "address_city_c",
    "address_state_c",
    "address_zip_code_c",
    "images_c",
    "description_c",
    "features_c",
    "year_built_c",
    "listing_date_c",
    "coordinates_lat_c",
    "coordinates_lng_c",
)

LISTING_DATE_FIELD = "listing_date_c"

IMAGE_SEPARATOR = "\n"
FEATURE_SEPARATOR = ","

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def coerce_id(value: Any) -> int:
    """Coerce a record id to an integer.

    Strings are read up to the first non-digit (``"42abc"`` -> ``42``).

    Raises
    ------
    CodecError
        If no integer can be read from ``value``.
    """
    if isinstance(value, bool):
        raise CodecError(f"Invalid record id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise CodecError(f"Invalid record id: {value!r}")
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    raise CodecError(f"Invalid record id: {value!r}")


def _split(value: Any, separator: str) -> list[str]:
    if not value:
        return []
    parts = value.split(separator) if isinstance(value, str) else list(value)
    return [str(part).strip() for part in parts if str(part).strip()]


def split_images(value: Any) -> list[str]:
    """Decode ``images_c`` text into URLs, dropping blank lines."""
    return _split(value, IMAGE_SEPARATOR)


def join_images(images: list[str] | str) -> str:
    """Encode image URLs as newline-joined text. Strings pass through."""
    if isinstance(images, str):
        return images
    return IMAGE_SEPARATOR.join(images)


def split_features(value: Any) -> list[str]:
    """Decode ``features_c`` text into feature names, dropping blank segments."""
    return _split(value, FEATURE_SEPARATOR)


def join_features(features: list[str] | str) -> str:
    """Encode feature names as comma-joined text. Strings pass through."""
    if isinstance(features, str):
        return features
    return FEATURE_SEPARATOR.join(features)


def decode_property(record: Mapping[str, Any]) -> Property:
    """Build a Property from a store record.

    Missing or empty fields decode to the zero value of their type;
    a missing listing date becomes the current UTC timestamp.
    """
    return Property(
        id=record.get(ID_FIELD) or 0,
        title=record.get("title_c") or "",
        price=record.get("price_c") or 0,
        type=record.get("type_c") or "",
        bedrooms=record.get("bedrooms_c") or 0,
        bathrooms=record.get("bathrooms_c") or 0,
        square_feet=record.get("square_feet_c") or 0,
        address=Address(
            street=record.get("address_street_c") or "",
            city=record.get("address_city_c") or "",
            state=record.get("address_state_c") or "",
            zip_code=record.get("address_zip_code_c") or "",
        ),
        images=split_images(record.get("images_c")),
        description=record.get("description_c") or "",
        features=split_features(record.get("features_c")),
        year_built=record.get("year_built_c") or 0,
        listing_date=record.get(LISTING_DATE_FIELD) or utc_timestamp(),
        coordinates=Coordinates(
            lat=record.get("coordinates_lat_c") or 0,
            lng=record.get("coordinates_lng_c") or 0,
        ),
    )


def _as_input(data: Property | PropertyInput | Mapping[str, Any]) -> PropertyInput:
    if isinstance(data, PropertyInput):
        return data
    if isinstance(data, Property):
        return PropertyInput.from_property(data)
    if isinstance(data, Mapping):
        return PropertyInput.from_dict(data)
    raise CodecError(f"Cannot encode {type(data).__name__} as a property record")


def encode_property(
    data: Property | PropertyInput | Mapping[str, Any],
    record_id: Any = None,
) -> dict[str, Any]:
    """Build a store record from UI data.

    Fields left as ``None`` are omitted so partial updates only touch
    what was supplied. ``Id`` is included only when ``record_id`` is given.
    """
    payload = _as_input(data)
    address = payload.address
    coordinates = payload.coordinates

    fields: dict[str, Any] = {
        "title_c": payload.title,
        "price_c": payload.price,
        "type_c": payload.type,
        "bedrooms_c": payload.bedrooms,
        "bathrooms_c": payload.bathrooms,
        "square_feet_c": payload.square_feet,
        "address_street_c": address.street if address else None,
        "address_city_c": address.city if address else None,
        "address_state_c": address.state if address else None,
        "address_zip_code_c": address.zip_code if address else None,
        "images_c": join_images(payload.images) if payload.images is not None else None,
        "description_c": payload.description,
        "features_c": join_features(payload.features) if payload.features is not None else None,
        "year_built_c": payload.year_built,
        LISTING_DATE_FIELD: payload.listing_date,
        "coordinates_lat_c": coordinates.lat if coordinates else None,
        "coordinates_lng_c": coordinates.lng if coordinates else None,
    }

    record = {key: value for key, value in fields.items() if value is not None}
    if record_id is not None:
        return {ID_FIELD: coerce_id(record_id), **record}
    return record


def fields_param(fields: tuple[str, ...] = PROPERTY_FIELDS) -> list[dict[str, dict[str, str]]]:
    """Field selection in the SDK request shape."""
    return [{"field": {"Name": name}} for name in fields]


def order_by_param(field_name: str = LISTING_DATE_FIELD, descending: bool = True) -> list[dict[str, str]]:
    """Ordering clause in the SDK request shape."""
    return [{"fieldName": field_name, "sorttype": "DESC" if descending else "ASC"}]
