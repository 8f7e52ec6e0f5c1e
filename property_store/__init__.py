"""Record-store adapter for property listings."""

from property_store.adapter import PropertyRecordAdapter
from property_store.codec import PROPERTY_ENTITY, PROPERTY_FIELDS, decode_property, encode_property
from property_store.models import Address, Coordinates, Property, PropertyInput
from property_store.repository import PropertyRepository
from property_store.results import AdapterError, ErrorKind, OperationResult

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AdapterError",
    "Coordinates",
    "ErrorKind",
    "OperationResult",
    "PROPERTY_ENTITY",
    "PROPERTY_FIELDS",
    "Property",
    "PropertyInput",
    "PropertyRecordAdapter",
    "PropertyRepository",
    "__version__",
    "decode_property",
    "encode_property",
]
