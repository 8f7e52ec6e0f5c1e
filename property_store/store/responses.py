"""Typed views over record-store response envelopes."""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class FieldError:
    """Validation error on a single field of a submitted record."""

    field_label: str
    message: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldError":
        return cls(
            field_label=str(data.get("fieldLabel") or ""),
            message=str(data.get("message") or ""),
        )


@dataclass(frozen=True)
class RecordResult:
    """Per-record outcome inside a batch response."""

    success: bool
    data: dict[str, Any] | None = None
    errors: list[FieldError] = field(default_factory=list)
    message: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RecordResult":
        return cls(
            success=bool(data.get("success")),
            data=data.get("data"),
            errors=[FieldError.from_dict(e) for e in data.get("errors") or []],
            message=data.get("message") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            result["data"] = self.data
        if self.errors:
            result["errors"] = [
                {"fieldLabel": e.field_label, "message": e.message} for e in self.errors
            ]
        if self.message:
            result["message"] = self.message
        return result


@dataclass(frozen=True)
class Envelope:
    """Top-level response of any record-store call."""

    success: bool
    data: Any = None
    results: list[RecordResult] | None = None
    message: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Envelope":
        results = data.get("results")
        return cls(
            success=bool(data.get("success")),
            data=data.get("data"),
            results=[RecordResult.from_dict(r) for r in results] if results is not None else None,
            message=data.get("message") or None,
        )

    @property
    def succeeded(self) -> list[RecordResult]:
        """Batch results that reported success."""
        return [r for r in self.results or [] if r.success]

    @property
    def failed(self) -> list[RecordResult]:
        """Batch results that reported failure."""
        return [r for r in self.results or [] if not r.success]
