"""Property operations against a record-store, returning OperationResult values.

Every call is one request/response cycle with no retry and no shared
state between calls. Failures of any kind are logged and reported in
the result; nothing is raised to the caller.
"""

import json
import logging
from typing import Any, Mapping

from property_store.codec import (
    PROPERTY_ENTITY,
    coerce_id,
    decode_property,
    encode_property,
    fields_param,
    order_by_param,
)
from property_store.models import Property, PropertyInput
from property_store.results import AdapterError, ErrorKind, OperationResult
from property_store.store.protocol import RecordStoreClient
from property_store.store.responses import Envelope, RecordResult

logger = logging.getLogger(__name__)

MSG_CREATED = "Property created successfully"
MSG_UPDATED = "Property updated successfully"
MSG_DELETED = "Property deleted successfully"


def remote_error_message(exc: BaseException) -> str | None:
    """Message of a structured remote error (``exc.response.data.message``).

    Returns ``None`` for errors that carry no such message, e.g. a
    connection failure.
    """
    response = getattr(exc, "response", None)
    if response is None:
        return None

    if isinstance(response, Mapping):
        data = response.get("data")
    else:
        data = getattr(response, "data", None)
        if data is None and callable(getattr(response, "json", None)):
            try:
                data = response.json()
            except ValueError:
                data = None

    if isinstance(data, Mapping):
        message = data.get("message")
    else:
        message = getattr(data, "message", None)
    return str(message) if message else None


class PropertyRepository:
    """Property CRUD over an injected record-store client.

    Parameters
    ----------
    client : RecordStoreClient
        Record-store client; one instance may serve concurrent calls.
    entity : str
        Entity name of property records on the store.
    """

    def __init__(self, client: RecordStoreClient, entity: str = PROPERTY_ENTITY) -> None:
        self.client = client
        self.entity = entity

    async def fetch_all(self) -> OperationResult[list[Property]]:
        """All properties, newest listing first."""
        params = {"fields": fields_param(), "orderBy": order_by_param()}
        try:
            response = await self.client.fetch_records(self.entity, params)
            envelope = Envelope.from_dict(response)
            if not envelope.success:
                return self._remote_failure(envelope)
            return OperationResult(value=[decode_property(row) for row in envelope.data or []])
        except Exception as e:
            return self._exception_failure("Error fetching properties", e)

    async def fetch_by_id(self, record_id: Any) -> OperationResult[Property]:
        """One property; no value and no error when the record does not exist."""
        try:
            response = await self.client.get_record_by_id(
                self.entity, coerce_id(record_id), {"fields": fields_param()}
            )
            envelope = Envelope.from_dict(response)
            if not envelope.success:
                return self._remote_failure(envelope)
            if not envelope.data:
                logger.info("Property with Id %s not found", record_id)
                return OperationResult()
            return OperationResult(value=decode_property(envelope.data))
        except Exception as e:
            return self._exception_failure(f"Error fetching property with Id {record_id}", e)

    async def create(self, data: PropertyInput | Property | Mapping[str, Any]) -> OperationResult[Property]:
        """Create one property; the store assigns its ``Id``."""
        try:
            params = {"records": [encode_property(data)]}
            response = await self.client.create_record(self.entity, params)
            return self._saved(Envelope.from_dict(response), "create", MSG_CREATED)
        except Exception as e:
            return self._exception_failure("Error creating property", e)

    async def update(
        self, record_id: Any, data: PropertyInput | Property | Mapping[str, Any]
    ) -> OperationResult[Property]:
        """Update the supplied fields of one property."""
        try:
            params = {"records": [encode_property(data, record_id=coerce_id(record_id))]}
            response = await self.client.update_record(self.entity, params)
            return self._saved(Envelope.from_dict(response), "update", MSG_UPDATED)
        except Exception as e:
            return self._exception_failure("Error updating property", e)

    async def delete(self, record_id: Any) -> OperationResult[bool]:
        """Delete one property. The value is ``True`` if any record was deleted."""
        try:
            params = {"RecordIds": [coerce_id(record_id)]}
            response = await self.client.delete_record(self.entity, params)
            envelope = Envelope.from_dict(response)
            if not envelope.success:
                return self._remote_failure(envelope)

            errors = self._batch_errors(envelope.failed, "delete")
            if envelope.succeeded:
                return OperationResult(value=True, errors=errors, message=MSG_DELETED)
            return OperationResult(errors=errors)
        except Exception as e:
            return self._exception_failure("Error deleting property", e)

    def _saved(self, envelope: Envelope, action: str, message: str) -> OperationResult[Property]:
        if not envelope.success:
            return self._remote_failure(envelope)

        errors = self._batch_errors(envelope.failed, action)
        succeeded = envelope.succeeded
        if succeeded:
            if not succeeded[0].data:
                logger.error("Store reported a successful %s without record data", action)
                errors.append(AdapterError(ErrorKind.TRANSPORT, f"No record data returned for {action}"))
                return OperationResult(errors=errors)
            return OperationResult(
                value=decode_property(succeeded[0].data),
                errors=errors,
                message=message,
            )
        return OperationResult(errors=errors)

    @staticmethod
    def _batch_errors(failed: list[RecordResult], action: str) -> list[AdapterError]:
        if not failed:
            return []

        logger.error(
            "Failed to %s %d records:%s",
            action,
            len(failed),
            json.dumps([r.to_dict() for r in failed], default=str),
        )
        errors = []
        for record in failed:
            errors.extend(
                AdapterError(ErrorKind.FIELD, e.message, field_label=e.field_label)
                for e in record.errors
            )
            if record.message:
                errors.append(AdapterError(ErrorKind.RECORD, record.message))
        return errors

    @staticmethod
    def _remote_failure(envelope: Envelope) -> OperationResult[Any]:
        message = envelope.message or "Record-store request failed"
        logger.error(message)
        return OperationResult(errors=[AdapterError(ErrorKind.REMOTE, message)])

    @staticmethod
    def _exception_failure(context: str, exc: Exception) -> OperationResult[Any]:
        message = remote_error_message(exc)
        if message:
            logger.error("%s: %s", context, message)
            return OperationResult(errors=[AdapterError(ErrorKind.STRUCTURED, message)])

        logger.error("%s: %s", context, exc)
        logger.debug("%s", context, exc_info=exc)
        return OperationResult(errors=[AdapterError(ErrorKind.TRANSPORT, str(exc))])
