"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from property_store.models import AddressInput, CoordinatesInput, PropertyInput
from property_store.notifications import RecordingNotifier
from property_store.store import InMemoryRecordStore


class ScriptedClient:
    """Record-store client returning canned responses.

    ``responses`` maps a method name to the envelope it returns, or to an
    exception instance it raises. Every call is recorded in ``calls``.
    """

    def __init__(self, **responses: Any) -> None:
        self.responses = responses
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def _answer(self, method: str, *args: Any) -> dict[str, Any]:
        self.calls.append((method, args))
        response = self.responses[method]
        if isinstance(response, BaseException):
            raise response
        return response

    async def fetch_records(self, entity: str, params: dict[str, Any]) -> dict[str, Any]:
        return await self._answer("fetch_records", entity, params)

    async def get_record_by_id(self, entity: str, record_id: int, params: dict[str, Any]) -> dict[str, Any]:
        return await self._answer("get_record_by_id", entity, record_id, params)

    async def create_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]:
        return await self._answer("create_record", entity, params)

    async def update_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]:
        return await self._answer("update_record", entity, params)

    async def delete_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]:
        return await self._answer("delete_record", entity, params)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_record() -> dict[str, Any]:
    """Stored property record."""
    return {
        "Id": 7,
        "title_c": "Sunny Bungalow",
        "price_c": 425000,
        "type_c": "House",
        "bedrooms_c": 3,
        "bathrooms_c": 2,
        "square_feet_c": 1650,
        "address_street_c": "12 Elm St",
        "address_city_c": "Austin",
        "address_state_c": "TX",
        "address_zip_code_c": "78701",
        "images_c": "https://img.example/1.jpg\nhttps://img.example/2.jpg",
        "description_c": "Quiet street, big yard.",
        "features_c": "Garage,Pool,Garden",
        "year_built_c": 1998,
        "listing_date_c": "2024-03-01T10:00:00.000Z",
        "coordinates_lat_c": 30.2672,
        "coordinates_lng_c": -97.7431,
    }


@pytest.fixture
def sample_input() -> PropertyInput:
    """Complete create payload."""
    return PropertyInput(
        title="Harbor Loft",
        price=610000,
        type="Condo",
        bedrooms=2,
        bathrooms=2,
        square_feet=1100,
        address=AddressInput(street="5 Pier Rd", city="Boston", state="MA", zip_code="02110"),
        images=["https://img.example/loft.jpg"],
        description="Water views.",
        features=["Balcony", "Gym"],
        year_built=2015,
        listing_date="2024-05-20T08:30:00.000Z",
        coordinates=CoordinatesInput(lat=42.36, lng=-71.05),
    )


@pytest.fixture
def memory_store() -> InMemoryRecordStore:
    """Empty in-memory store with the property entity."""
    return InMemoryRecordStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Notifier that records every notification."""
    return RecordingNotifier()


@pytest.fixture
def make_client() -> type[ScriptedClient]:
    """Factory for clients with canned responses."""
    return ScriptedClient
