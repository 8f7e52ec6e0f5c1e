"""Notifier writing to the standard logging system."""

import logging

from property_store.notifications.base import BaseNotifier, Notification, NotificationLevel

_LOG_LEVELS = {
    NotificationLevel.SUCCESS: logging.INFO,
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.WARNING: logging.WARNING,
    NotificationLevel.ERROR: logging.ERROR,
}


class LoggingNotifier(BaseNotifier):
    """Route notifications to a logger (default ``property_store.notifications``)."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("property_store.notifications")

    def notify(self, notification: Notification) -> None:
        self.logger.log(
            _LOG_LEVELS[notification.level],
            notification.message,
            extra={"extra": {"notification_level": notification.level.value}},
        )
