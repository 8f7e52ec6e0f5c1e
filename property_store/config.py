"""Configuration management for property-store."""

from dataclasses import dataclass, field
from pathlib import Path

from property_store.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class RecordStoreConfig:
    """Credentials and entity naming for the remote record-store."""

    project_id: str = ""
    public_key: str = ""
    entity: str = "property_c"

    @property
    def is_configured(self) -> bool:
        """Whether credentials for a remote client are present."""
        return bool(self.project_id and self.public_key)


@dataclass
class FileStoreConfig:
    """JSON file store configuration."""

    path: Path = field(default_factory=lambda: Path("properties.json"))
    pretty: bool = False


@dataclass
class PropertyStoreConfig:
    """Main configuration for property-store."""

    record_store: RecordStoreConfig = field(default_factory=RecordStoreConfig)
    file_store: FileStoreConfig = field(default_factory=FileStoreConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Check the configuration for values nothing downstream can use."""
        if not self.record_store.entity:
            raise ConfigurationError("Entity name must not be empty")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "PropertyStoreConfig":
        """Create config from environment variables."""
        import os

        record_store = RecordStoreConfig(
            project_id=os.getenv("RECORD_STORE_PROJECT_ID", ""),
            public_key=os.getenv("RECORD_STORE_PUBLIC_KEY", ""),
            entity=os.getenv("PROPERTY_ENTITY", "property_c"),
        )

        file_store = FileStoreConfig(
            path=Path(os.getenv("PROPERTY_STORE_PATH", "properties.json")),
            pretty=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            record_store=record_store,
            file_store=file_store,
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
