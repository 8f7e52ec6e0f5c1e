"""Record-store persisted to a JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from property_store.exceptions import RecordStoreError
from property_store.store.memory import InMemoryRecordStore

logger = logging.getLogger(__name__)


class JsonFileRecordStore(InMemoryRecordStore):
    """In-memory record-store written to a JSON file after every change.

    The file holds one list of records per entity::

        {"property_c": [{"Id": 1, "title_c": "..."}, ...]}

    Parameters
    ----------
    path : str | Path
        JSON file to load from (if present) and write to.
    pretty : bool
        Pretty-print JSON output.
    entities : Mapping[str, Iterable[str]] | None
        Entity definitions, as for ``InMemoryRecordStore``.
    """

    def __init__(
        self,
        path: str | Path,
        pretty: bool = False,
        entities: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        super().__init__(entities)
        self.path = Path(path)
        self.pretty = pretty
        if self.path.exists():
            self._load()

    def _load(self) -> None:
        try:
            with open(self.path, encoding="utf-8") as f:
                data: dict[str, list[dict[str, Any]]] = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RecordStoreError(f"Cannot read record file {self.path}: {e}") from e

        for entity, records in data.items():
            if entity not in self.entities:
                logger.warning("Skipping unregistered entity %s in %s", entity, self.path)
                continue
            self.load_records(entity, records)
        logger.info("Loaded %s", self.path)

    def _commit(self, entity: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {name: self.records(name) for name in self.entities}

        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            else:
                json.dump(data, f, ensure_ascii=False, default=str)
        tmp_path.replace(self.path)
        logger.debug("Wrote %s after change to %s", self.path, entity)
