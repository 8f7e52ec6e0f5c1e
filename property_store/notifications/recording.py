"""Notifier that keeps notifications for later presentation."""

from property_store.notifications.base import BaseNotifier, Notification, NotificationLevel


class RecordingNotifier(BaseNotifier):
    """Collect notifications in memory until drained."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def messages(self, level: NotificationLevel | None = None) -> list[str]:
        """Messages recorded so far, optionally only those at ``level``."""
        return [
            n.message for n in self.notifications
            if level is None or n.level == level
        ]

    def drain(self) -> list[Notification]:
        """Return and forget every recorded notification."""
        drained, self.notifications = self.notifications, []
        return drained
