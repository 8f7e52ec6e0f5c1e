"""Record-store clients and response views."""

from property_store.store.json_file import JsonFileRecordStore
from property_store.store.memory import InMemoryRecordStore
from property_store.store.protocol import RecordStoreClient
from property_store.store.responses import Envelope, FieldError, RecordResult

__all__ = [
    "Envelope",
    "FieldError",
    "InMemoryRecordStore",
    "JsonFileRecordStore",
    "RecordResult",
    "RecordStoreClient",
]
