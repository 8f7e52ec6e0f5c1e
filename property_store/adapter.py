"""UI-facing property service: CRUD that never raises.

Each operation returns a safe value on failure (``[]``, ``None`` or
``False``) and reports what happened through a notifier. Callers that
want the failures themselves should use ``PropertyRepository``.
"""

from __future__ import annotations

from typing import Any, Mapping

from property_store.codec import PROPERTY_ENTITY
from property_store.models import Property, PropertyInput
from property_store.notifications import BaseNotifier, LoggingNotifier
from property_store.repository import PropertyRepository
from property_store.results import OperationResult
from property_store.store.protocol import RecordStoreClient

PropertyData = PropertyInput | Property | Mapping[str, Any]


class PropertyRecordAdapter:
    """Property CRUD with notifications.

    Parameters
    ----------
    client : RecordStoreClient
        Record-store client.
    notifier : BaseNotifier | None
        Where user-facing messages go (default: ``LoggingNotifier``).
    entity : str
        Entity name of property records on the store.
    """

    def __init__(
        self,
        client: RecordStoreClient,
        notifier: BaseNotifier | None = None,
        entity: str = PROPERTY_ENTITY,
    ) -> None:
        self.repository = PropertyRepository(client, entity)
        self.notifier = notifier or LoggingNotifier()

    async def list(self) -> list[Property]:
        """All properties, newest listing first; ``[]`` on failure."""
        result = await self.repository.fetch_all()
        self._present(result, "Failed to load properties")
        return result.unwrap_or([])

    async def get_by_id(self, record_id: Any) -> Property | None:
        """One property, or ``None`` if it is missing or the fetch failed."""
        result = await self.repository.fetch_by_id(record_id)
        self._present(result, "Failed to load property")
        return result.value

    async def create(self, data: PropertyData) -> Property | None:
        """The created property, or ``None``."""
        result = await self.repository.create(data)
        self._present(result, "Failed to create property")
        return result.value

    async def update(self, record_id: Any, data: PropertyData) -> Property | None:
        """The updated property, or ``None``."""
        result = await self.repository.update(record_id, data)
        self._present(result, "Failed to update property")
        return result.value

    async def delete(self, record_id: Any) -> bool:
        """Whether the property was deleted."""
        result = await self.repository.delete(record_id)
        self._present(result, "Failed to delete property")
        return result.unwrap_or(False)

    def _present(self, result: OperationResult[Any], fallback: str) -> None:
        # Raw exception text stays in the log; the user sees the fallback
        for error in result.errors:
            self.notifier.error(fallback if error.is_transport else error.display())
        if result.ok and result.message:
            self.notifier.success(result.message)
