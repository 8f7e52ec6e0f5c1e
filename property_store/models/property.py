"""Property models for listing records."""

from dataclasses import dataclass, field
from typing import Any, Mapping

from property_store.models.base import Address, Coordinates


@dataclass(frozen=True)
class Property:
    """Listed property as consumed by the UI.

    Built fresh from every store fetch and never mutated; the store
    record is the durable entity. ``features`` order is not significant.
    """

    id: int
    title: str = ""
    price: float = 0
    type: str = ""
    bedrooms: int = 0
    bathrooms: int = 0
    square_feet: int = 0
    address: Address = field(default_factory=Address)
    images: list[str] = field(default_factory=list)
    description: str = ""
    features: list[str] = field(default_factory=list)
    year_built: int = 0
    listing_date: str = ""
    coordinates: Coordinates = field(default_factory=Coordinates)


@dataclass
class AddressInput:
    """Partial address supplied by the UI."""

    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


@dataclass
class CoordinatesInput:
    """Partial coordinates supplied by the UI."""

    lat: float | None = None
    lng: float | None = None


@dataclass
class PropertyInput:
    """Create/update payload. ``None`` means the field was not supplied.

    ``images`` and ``features`` accept either a list or text that is
    already in the stored (joined) form.
    """

    title: str | None = None
    price: float | None = None
    type: str | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    square_feet: int | None = None
    address: AddressInput | None = None
    images: list[str] | str | None = None
    description: str | None = None
    features: list[str] | str | None = None
    year_built: int | None = None
    listing_date: str | None = None
    coordinates: CoordinatesInput | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PropertyInput":
        """Build from the UI camelCase shape (``squareFeet``, ``zipCode`` ...)."""
        address = data.get("address")
        coordinates = data.get("coordinates")
        return cls(
            title=data.get("title"),
            price=data.get("price"),
            type=data.get("type"),
            bedrooms=data.get("bedrooms"),
            bathrooms=data.get("bathrooms"),
            square_feet=data.get("squareFeet"),
            address=AddressInput(
                street=address.get("street"),
                city=address.get("city"),
                state=address.get("state"),
                zip_code=address.get("zipCode"),
            ) if address is not None else None,
            images=data.get("images"),
            description=data.get("description"),
            features=data.get("features"),
            year_built=data.get("yearBuilt"),
            listing_date=data.get("listingDate"),
            coordinates=CoordinatesInput(
                lat=coordinates.get("lat"),
                lng=coordinates.get("lng"),
            ) if coordinates is not None else None,
        )

    @classmethod
    def from_property(cls, prop: Property) -> "PropertyInput":
        """Full payload carrying every field of an existing property."""
        return cls(
            title=prop.title,
            price=prop.price,
            type=prop.type,
            bedrooms=prop.bedrooms,
            bathrooms=prop.bathrooms,
            square_feet=prop.square_feet,
            address=AddressInput(
                street=prop.address.street,
                city=prop.address.city,
                state=prop.address.state,
                zip_code=prop.address.zip_code,
            ),
            images=list(prop.images),
            description=prop.description,
            features=list(prop.features),
            year_built=prop.year_built,
            listing_date=prop.listing_date,
            coordinates=CoordinatesInput(lat=prop.coordinates.lat, lng=prop.coordinates.lng),
        )
