"""Console notifier for scripts and development."""

from property_store.notifications.base import BaseNotifier, Notification, NotificationLevel

_MARKERS = {
    NotificationLevel.SUCCESS: "[ok]",
    NotificationLevel.INFO: "[info]",
    NotificationLevel.WARNING: "[warn]",
    NotificationLevel.ERROR: "[error]",
}


class ConsoleNotifier(BaseNotifier):
    """Print notifications to stdout."""

    def __init__(self, show_levels: bool = True) -> None:
        """Initialize console notifier.

        Parameters
        ----------
        show_levels : bool
            Prefix each line with a level marker.
        """
        self.show_levels = show_levels
        self._counts: dict[NotificationLevel, int] = {}

    def notify(self, notification: Notification) -> None:
        if self.show_levels:
            print(f"{_MARKERS[notification.level]} {notification.message}")
        else:
            print(notification.message)
        self._counts[notification.level] = self._counts.get(notification.level, 0) + 1

    def close(self) -> None:
        """Print summary."""
        if not self._counts:
            return
        summary = ", ".join(f"{level.value.lower()}={count}" for level, count in self._counts.items())
        print(f"Notifications: {summary}")
