"""Value objects shared by property models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Postal address of a listed property."""

    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


@dataclass(frozen=True)
class Coordinates:
    """Map position (WGS84 degrees)."""

    lat: float = 0
    lng: float = 0
