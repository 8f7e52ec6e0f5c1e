"""Tests for config and logging."""

import json
import logging
import sys
from pathlib import Path

import pytest

from property_store.config import FileStoreConfig, PropertyStoreConfig, RecordStoreConfig
from property_store.exceptions import ConfigurationError
from property_store.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = [
    "RECORD_STORE_PROJECT_ID",
    "RECORD_STORE_PUBLIC_KEY",
    "PROPERTY_ENTITY",
    "PROPERTY_STORE_PATH",
    "PRETTY_JSON",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestRecordStoreConfig:
    """Tests for RecordStoreConfig."""

    def test_default_values(self) -> None:
        config = RecordStoreConfig()

        assert config.project_id == ""
        assert config.entity == "property_c"
        assert config.is_configured is False

    def test_is_configured(self) -> None:
        assert RecordStoreConfig(project_id="p1", public_key="k1").is_configured is True
        assert RecordStoreConfig(project_id="p1").is_configured is False


class TestFileStoreConfig:
    """Tests for FileStoreConfig."""

    def test_default_values(self) -> None:
        config = FileStoreConfig()

        assert config.path == Path("properties.json")
        assert config.pretty is False


class TestPropertyStoreConfig:
    """Tests for PropertyStoreConfig."""

    def test_default_values(self) -> None:
        config = PropertyStoreConfig()

        assert isinstance(config.record_store, RecordStoreConfig)
        assert isinstance(config.file_store, FileStoreConfig)
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        config = PropertyStoreConfig.from_env()

        assert config.record_store.entity == "property_c"
        assert config.record_store.is_configured is False
        assert config.file_store.path == Path("properties.json")
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("RECORD_STORE_PROJECT_ID", "proj-1")
        clean_env.setenv("RECORD_STORE_PUBLIC_KEY", "pk-1")
        clean_env.setenv("PROPERTY_ENTITY", "listing_c")
        clean_env.setenv("PROPERTY_STORE_PATH", "/data/listings.json")
        clean_env.setenv("PRETTY_JSON", "true")
        clean_env.setenv("SEED", "12345")
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "json")

        config = PropertyStoreConfig.from_env()

        assert config.record_store.project_id == "proj-1"
        assert config.record_store.is_configured is True
        assert config.record_store.entity == "listing_c"
        assert config.file_store.path == Path("/data/listings.json")
        assert config.file_store.pretty is True
        assert config.seed == 12345
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_validate_ok(self) -> None:
        PropertyStoreConfig().validate()

    def test_validate_empty_entity(self) -> None:
        config = PropertyStoreConfig(record_store=RecordStoreConfig(entity=""))

        with pytest.raises(ConfigurationError):
            config.validate()

    def test_validate_log_format(self) -> None:
        with pytest.raises(ConfigurationError, match="xml"):
            PropertyStoreConfig(log_format="xml").validate()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("property_store").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="test.logger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"notification_level": "ERROR"}

        data = json.loads(JsonFormatter().format(record))

        assert data["notification_level"] == "ERROR"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("test.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")


class TestPackageInit:
    """Tests for property_store __init__.py."""

    def test_version_exported(self) -> None:
        from property_store import __version__

        assert isinstance(__version__, str)
