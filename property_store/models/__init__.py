"""Domain models for property listings."""

from property_store.models.base import Address, Coordinates
from property_store.models.property import (
    AddressInput,
    CoordinatesInput,
    Property,
    PropertyInput,
)

__all__ = [
    "Address",
    "AddressInput",
    "Coordinates",
    "CoordinatesInput",
    "Property",
    "PropertyInput",
]
