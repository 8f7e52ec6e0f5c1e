"""In-memory record-store speaking the client SDK's request/response shapes."""

import copy
import logging
from typing import Any, Iterable, Mapping

from property_store.codec import ID_FIELD, PROPERTY_ENTITY, PROPERTY_FIELDS
from property_store.exceptions import RemoteRequestError

logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """Record-store kept in process memory.

    Each registered entity has a fixed set of known fields. Batch
    operations validate every record independently and report
    per-record outcomes; an unknown entity fails the whole envelope.
    Malformed requests raise ``RemoteRequestError``.

    Parameters
    ----------
    entities : Mapping[str, Iterable[str]] | None
        Entity name -> field names (``Id`` is implied). Defaults to the
        ``property_c`` entity.
    """

    def __init__(self, entities: Mapping[str, Iterable[str]] | None = None) -> None:
        if entities is None:
            entities = {PROPERTY_ENTITY: PROPERTY_FIELDS}

        self._fields: dict[str, frozenset[str]] = {}
        self._records: dict[str, dict[int, dict[str, Any]]] = {}
        self._next_id: dict[str, int] = {}

        for name, names in entities.items():
            self.register_entity(name, names)

    def register_entity(self, entity: str, field_names: Iterable[str]) -> None:
        """Register an entity and its known fields."""
        self._fields[entity] = frozenset(field_names) | {ID_FIELD}
        self._records.setdefault(entity, {})
        self._next_id.setdefault(entity, 1)

    def load_records(self, entity: str, records: Iterable[Mapping[str, Any]]) -> None:
        """Insert records verbatim, keeping their ``Id``."""
        table = self._records[entity]
        for record in records:
            record_id = int(record[ID_FIELD])
            table[record_id] = dict(record)
            self._next_id[entity] = max(self._next_id[entity], record_id + 1)

    def records(self, entity: str) -> list[dict[str, Any]]:
        """Copies of every stored record of ``entity`` in insertion order."""
        return [copy.deepcopy(r) for r in self._records.get(entity, {}).values()]

    @property
    def entities(self) -> list[str]:
        return list(self._fields)

    # SDK surface

    async def fetch_records(self, entity: str, params: dict[str, Any]) -> dict[str, Any]:
        """Return every record of ``entity``, projected and ordered."""
        if entity not in self._fields:
            return self._unknown_entity(entity)

        selected = self._selected_fields(params)
        unknown = [name for name in selected if name not in self._fields[entity]]
        if unknown:
            return {
                "success": False,
                "message": f"Unknown field(s) on {entity}: {', '.join(unknown)}",
            }

        rows = list(self._records[entity].values())
        rows = self._order(rows, params.get("orderBy") or [])

        paging = params.get("pagingInfo") or {}
        offset = int(paging.get("offset", 0))
        limit = paging.get("limit")
        total = len(rows)
        rows = rows[offset:offset + int(limit)] if limit is not None else rows[offset:]

        return {
            "success": True,
            "data": [self._project(row, selected) for row in rows],
            "total": total,
        }

    async def get_record_by_id(
        self, entity: str, record_id: int, params: dict[str, Any]
    ) -> dict[str, Any]:
        """Return one record, or ``data: None`` when it does not exist."""
        if entity not in self._fields:
            return self._unknown_entity(entity)
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise RemoteRequestError(f"Record id must be an integer, got {record_id!r}")

        row = self._records[entity].get(record_id)
        if row is None:
            return {"success": True, "data": None}
        return {"success": True, "data": self._project(row, self._selected_fields(params))}

    async def create_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]:
        """Insert each submitted record, assigning a new ``Id``."""
        if entity not in self._fields:
            return self._unknown_entity(entity)

        results = []
        created = False
        for record in self._batch(params, "records"):
            errors = self._field_errors(entity, record)
            if ID_FIELD in record:
                results.append({"success": False, "message": "Id is assigned by the store"})
                continue
            if errors:
                results.append({"success": False, "errors": errors})
                continue

            record_id = self._next_id[entity]
            self._next_id[entity] = record_id + 1
            row = {ID_FIELD: record_id, **record}
            self._records[entity][record_id] = row
            created = True
            results.append({"success": True, "data": copy.deepcopy(row)})

        if created:
            self._commit(entity)
        return {"success": True, "results": results}

    async def update_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]:
        """Merge each submitted record into the stored record with its ``Id``."""
        if entity not in self._fields:
            return self._unknown_entity(entity)

        results = []
        updated = False
        for record in self._batch(params, "records"):
            record_id = record.get(ID_FIELD)
            if isinstance(record_id, bool) or not isinstance(record_id, int):
                results.append({"success": False, "message": "Id is required for update"})
                continue
            row = self._records[entity].get(record_id)
            if row is None:
                results.append({"success": False, "message": f"Record {record_id} not found"})
                continue
            errors = self._field_errors(entity, record)
            if errors:
                results.append({"success": False, "errors": errors})
                continue

            row.update(record)
            updated = True
            results.append({"success": True, "data": copy.deepcopy(row)})

        if updated:
            self._commit(entity)
        return {"success": True, "results": results}

    async def delete_record(self, entity: str, params: dict[str, Any]) -> dict[str, Any]:
        """Remove each record listed in ``RecordIds``."""
        if entity not in self._fields:
            return self._unknown_entity(entity)

        results = []
        deleted = False
        for record_id in self._batch(params, "RecordIds"):
            if self._records[entity].pop(record_id, None) is None:
                results.append({"success": False, "message": f"Record {record_id} not found"})
                continue
            deleted = True
            results.append({"success": True})

        if deleted:
            self._commit(entity)
        return {"success": True, "results": results}

    # Internals

    def _commit(self, entity: str) -> None:
        """Hook called after a successful mutation of ``entity``."""
        logger.debug("Committed %s (%d records)", entity, len(self._records[entity]))

    @staticmethod
    def _unknown_entity(entity: str) -> dict[str, Any]:
        return {"success": False, "message": f"Entity {entity} not found"}

    @staticmethod
    def _batch(params: Mapping[str, Any], key: str) -> list[Any]:
        items = params.get(key)
        if not isinstance(items, list):
            raise RemoteRequestError(f"'{key}' must be a list")
        return items

    def _field_errors(self, entity: str, record: Mapping[str, Any]) -> list[dict[str, str]]:
        known = self._fields[entity]
        return [
            {"fieldLabel": name, "message": "Unknown field"}
            for name in record
            if name not in known
        ]

    @staticmethod
    def _selected_fields(params: Mapping[str, Any]) -> list[str]:
        return [f["field"]["Name"] for f in params.get("fields") or []]

    @staticmethod
    def _project(row: Mapping[str, Any], selected: list[str]) -> dict[str, Any]:
        if not selected:
            return copy.deepcopy(dict(row))
        return {name: copy.deepcopy(row.get(name)) for name in selected}

    @staticmethod
    def _order(rows: list[dict[str, Any]], order_by: list[Mapping[str, str]]) -> list[dict[str, Any]]:
        # Stable sorts applied from the least significant key; missing values sort last
        for clause in reversed(order_by):
            name = clause["fieldName"]
            descending = str(clause.get("sorttype", "ASC")).upper() == "DESC"
            present = [r for r in rows if r.get(name) is not None]
            missing = [r for r in rows if r.get(name) is None]
            present.sort(key=lambda r: r[name], reverse=descending)
            rows = present + missing
        return rows
