"""User-facing notification channels."""

from property_store.notifications.base import BaseNotifier, Notification, NotificationLevel
from property_store.notifications.console import ConsoleNotifier
from property_store.notifications.log import LoggingNotifier
from property_store.notifications.recording import RecordingNotifier

__all__ = [
    "BaseNotifier",
    "ConsoleNotifier",
    "LoggingNotifier",
    "Notification",
    "NotificationLevel",
    "RecordingNotifier",
]
