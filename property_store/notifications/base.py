"""Notification model and the notifier base class."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NotificationLevel(str, Enum):
    """Severity of a notification."""

    SUCCESS = "SUCCESS"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Notification:
    """Transient user-facing message."""

    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class BaseNotifier:
    """Base class for notifiers.

    Subclasses implement ``notify``; the level helpers build the
    ``Notification`` for them.
    """

    def notify(self, notification: Notification) -> None:
        raise NotImplementedError

    def success(self, message: str) -> None:
        self.notify(Notification(NotificationLevel.SUCCESS, message))

    def info(self, message: str) -> None:
        self.notify(Notification(NotificationLevel.INFO, message))

    def warning(self, message: str) -> None:
        self.notify(Notification(NotificationLevel.WARNING, message))

    def error(self, message: str) -> None:
        self.notify(Notification(NotificationLevel.ERROR, message))
