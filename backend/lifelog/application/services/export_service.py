"""Application service — full dump of one user's records, table by table.

Tables follow the entity descriptors. Child tables without an owner column
are reached through the ids of the caller's parent records.
"""

import csv
import io
import logging
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Any

from lifelog.application.interfaces import Record, RecordStore
from lifelog.application.services.descriptors import ALL_DESCRIPTORS
from lifelog.domain.entities import AllOf, AnyOf, ChildSpec, EntityDescriptor, eq, owned
from lifelog.domain.exceptions import InvalidRecordError

logger = logging.getLogger(__name__)


def _export_tables() -> Iterator[tuple[EntityDescriptor, ChildSpec | None]]:
    for descriptor in ALL_DESCRIPTORS:
        yield descriptor, None
        for spec in descriptor.children:
            yield descriptor, spec


def _table_name(descriptor: EntityDescriptor, spec: ChildSpec | None) -> str:
    return spec.entity if spec else descriptor.entity


EXPORT_TABLES = tuple(_table_name(d, s) for d, s in _export_tables())


def to_csv(records: list[Record]) -> str:
    """Render records as CSV with a header row taken from the first record."""
    if not records:
        return ""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(records[0]), lineterminator="\n")
    writer.writeheader()
    for record in records:
        writer.writerow({k: "" if v is None else v for k, v in record.items()})
    return buffer.getvalue()


class ExportService:
    """Reads every table the caller owns rows in, without pagination."""

    def __init__(self, store: RecordStore):
        self._store = store

    async def _parent_rows(self, descriptor: EntityDescriptor, owner_id: str) -> list[Record]:
        return await self._store.find_many(
            descriptor.entity,
            owned(descriptor.owner_field, owner_id),
            order=descriptor.order_by,
        )

    async def _child_rows(
        self,
        descriptor: EntityDescriptor,
        spec: ChildSpec,
        owner_id: str,
        parents: list[Record],
    ) -> list[Record]:
        if spec.carries_owner:
            return await self._store.find_many(
                spec.entity, owned(descriptor.owner_field, owner_id)
            )
        if not parents:
            return []
        by_parent = AnyOf(tuple(eq(spec.foreign_key, p["id"]) for p in parents))
        return await self._store.find_many(spec.entity, AllOf((by_parent,)))

    async def _collect(
        self, owner_id: str, only: str | None = None
    ) -> dict[str, list[Record]]:
        if only is not None and only not in EXPORT_TABLES:
            raise InvalidRecordError(
                f"Unknown table '{only}'. Expected one of: {', '.join(EXPORT_TABLES)}"
            )

        tables: dict[str, list[Record]] = {}
        parents: dict[str, list[Record]] = {}
        for descriptor, spec in _export_tables():
            name = _table_name(descriptor, spec)
            wanted = only is None or only == name
            if spec is None:
                # Parents are also read when one of their children is requested
                needs_parent = wanted or any(
                    c.entity == only and not c.carries_owner for c in descriptor.children
                )
                if needs_parent:
                    parents[descriptor.entity] = await self._parent_rows(descriptor, owner_id)
                if wanted:
                    tables[name] = parents[descriptor.entity]
            elif wanted:
                tables[name] = await self._child_rows(
                    descriptor, spec, owner_id, parents.get(descriptor.entity, [])
                )
        return tables

    async def export_json(self, owner_id: str, table: str | None = None) -> dict[str, Any]:
        tables = await self._collect(owner_id, table)
        exported_at = datetime.now(timezone.utc).isoformat()
        logger.info(
            "Exported %d rows across %d tables for user %s",
            sum(len(rows) for rows in tables.values()),
            len(tables),
            owner_id,
        )
        if table is not None:
            return {
                "format": "json",
                "table": table,
                "exportedAt": exported_at,
                "data": tables[table],
            }
        return {
            "format": "json",
            "exportedAt": exported_at,
            "userId": owner_id,
            "tables": tables,
        }

    async def export_csv(self, owner_id: str, table: str) -> str:
        tables = await self._collect(owner_id, table)
        return to_csv(tables[table])

    async def summary(self, owner_id: str) -> dict[str, Any]:
        tables = await self._collect(owner_id)
        counts = {name: len(rows) for name, rows in tables.items()}
        return {"counts": counts, "totalRecords": sum(counts.values())}
