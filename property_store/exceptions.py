"""Custom exception hierarchy for property-store."""

from typing import Any


class PropertyStoreError(Exception):
    """Base exception for all property-store errors."""


class ConfigurationError(PropertyStoreError):
    """Raised when configuration is invalid or missing."""


class CodecError(PropertyStoreError, ValueError):
    """Raised when a value cannot be translated to the storage shape."""


class RecordStoreError(PropertyStoreError):
    """Raised when the record-store rejects a request."""


class ErrorResponse:
    """Response payload attached to a structured remote error."""

    def __init__(self, data: dict[str, Any], status: int = 400) -> None:
        self.data = data
        self.status = status


class RemoteRequestError(RecordStoreError):
    """Structured remote-side error.

    Carries ``response.data["message"]`` the same way SDK errors do, so
    callers can tell a validation failure from a generic transport error.
    """

    def __init__(self, message: str, status: int = 400) -> None:
        super().__init__(message)
        self.response = ErrorResponse({"message": message}, status=status)
