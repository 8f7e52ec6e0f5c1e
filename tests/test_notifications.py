"""Tests for notifiers."""

import logging

import pytest

from property_store.notifications import (
    BaseNotifier,
    ConsoleNotifier,
    LoggingNotifier,
    Notification,
    NotificationLevel,
    RecordingNotifier,
)


class TestBaseNotifier:
    """Tests for BaseNotifier."""

    def test_notify_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            BaseNotifier().error("boom")


class TestRecordingNotifier:
    """Tests for RecordingNotifier."""

    def test_level_helpers(self) -> None:
        notifier = RecordingNotifier()

        notifier.success("saved")
        notifier.info("fyi")
        notifier.warning("careful")
        notifier.error("failed")

        assert [n.level for n in notifier.notifications] == [
            NotificationLevel.SUCCESS,
            NotificationLevel.INFO,
            NotificationLevel.WARNING,
            NotificationLevel.ERROR,
        ]
        assert notifier.messages(NotificationLevel.ERROR) == ["failed"]

    def test_drain(self) -> None:
        notifier = RecordingNotifier()
        notifier.error("one")

        drained = notifier.drain()

        assert [n.message for n in drained] == ["one"]
        assert notifier.notifications == []


class TestConsoleNotifier:
    """Tests for ConsoleNotifier."""

    def test_prints_with_marker(self, capsys: pytest.CaptureFixture) -> None:
        notifier = ConsoleNotifier()

        notifier.success("Property created successfully")
        notifier.error("Title: is required")

        out = capsys.readouterr().out
        assert "[ok] Property created successfully" in out
        assert "[error] Title: is required" in out

    def test_without_levels(self, capsys: pytest.CaptureFixture) -> None:
        notifier = ConsoleNotifier(show_levels=False)

        notifier.info("hello")

        assert capsys.readouterr().out == "hello\n"

    def test_close_summary(self, capsys: pytest.CaptureFixture) -> None:
        notifier = ConsoleNotifier()
        notifier.error("a")
        notifier.error("b")
        capsys.readouterr()

        notifier.close()

        assert "error=2" in capsys.readouterr().out

    def test_close_silent_when_empty(self, capsys: pytest.CaptureFixture) -> None:
        ConsoleNotifier().close()

        assert capsys.readouterr().out == ""


class TestLoggingNotifier:
    """Tests for LoggingNotifier."""

    def test_levels(self, caplog: pytest.LogCaptureFixture) -> None:
        notifier = LoggingNotifier()

        with caplog.at_level(logging.INFO, logger="property_store.notifications"):
            notifier.success("saved")
            notifier.error("failed")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.INFO, "saved"),
            (logging.ERROR, "failed"),
        ]
        assert caplog.records[1].extra == {"notification_level": "ERROR"}

    def test_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("ui.toasts")
        notifier = LoggingNotifier(logger)

        with caplog.at_level(logging.WARNING, logger="ui.toasts"):
            notifier.notify(Notification(NotificationLevel.WARNING, "slow"))

        assert caplog.records[0].name == "ui.toasts"
