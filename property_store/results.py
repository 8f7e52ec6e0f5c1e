"""Result types returned by the repository layer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Source of an AdapterError."""

    REMOTE = "REMOTE"  # envelope reported success=false
    RECORD = "RECORD"  # batch sub-record failed
    FIELD = "FIELD"  # field-level error inside a failed sub-record
    STRUCTURED = "STRUCTURED"  # exception carrying response.data.message
    TRANSPORT = "TRANSPORT"  # any other exception


@dataclass(frozen=True)
class AdapterError:
    """A single failure surfaced by a store operation."""

    kind: ErrorKind
    message: str
    field_label: str | None = None

    @property
    def is_transport(self) -> bool:
        """Whether the message is raw exception text rather than store output."""
        return self.kind == ErrorKind.TRANSPORT

    def display(self) -> str:
        """Text suitable for a user-facing notification."""
        if self.kind == ErrorKind.FIELD and self.field_label:
            return f"{self.field_label}: {self.message}"
        return self.message


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a store operation.

    ``value`` is set when the operation produced something usable;
    ``errors`` lists every failure reported along the way, in order.
    A batch can yield both a value and errors.
    """

    value: T | None = None
    errors: list[AdapterError] = field(default_factory=list)
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` when there is none."""
        return self.value if self.value is not None else default
