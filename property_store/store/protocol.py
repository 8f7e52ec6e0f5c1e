"""Interface of the record-store client the adapter talks to."""

from typing import Any, Protocol


class RecordStoreClient(Protocol):
    """Async record-store client.

    Requests and responses use the SDK's dictionary shapes: every
    response is an envelope with ``success`` and either ``data``,
    ``results`` (batch operations) or ``message``.
    """

    async def fetch_records(self, entity: str, params: dict[str, Any]) -> dict[str, Any]: ...

    async def get_record_by_id(
        self, entity: str, record_id: int, params: dict[str, Any]
    ) -> dict[str, Any]: ...

    async def create_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]: ...

    async def update_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]: ...

    async def delete_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]: ...
