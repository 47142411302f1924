"""In-memory fake record store shared by the unit tests."""

import uuid
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

import pytest

from lifelog.application.interfaces import Record, RecordStore
from lifelog.domain.entities import (
    AllOf,
    AnyOf,
    Condition,
    Operator,
    Predicate,
    RelationSpec,
    SortDirection,
    SortSpec,
)
from lifelog.domain.exceptions import DuplicateEntityError

_MISSING = object()


def matches(record: Record, predicate: Predicate) -> bool:
    if isinstance(predicate, AllOf):
        return all(matches(record, clause) for clause in predicate.clauses)
    if isinstance(predicate, AnyOf):
        return any(matches(record, condition) for condition in predicate.conditions)

    value = record.get(predicate.field, _MISSING)
    if value is _MISSING:
        return False
    if predicate.op == Operator.EQ:
        return value == predicate.value
    if value is None:
        return False
    if predicate.op == Operator.CONTAINS:
        return isinstance(value, str) and predicate.value.lower() in value.lower()
    if predicate.op == Operator.GTE:
        return value >= predicate.value
    if predicate.op == Operator.LTE:
        return value <= predicate.value
    raise AssertionError(predicate.op)


class FakeRecordStore(RecordStore):
    """Dict-backed store; enforces the unique keys it is given."""

    def __init__(self, unique_keys: Mapping[str, tuple[str, ...]] | None = None):
        self.tables: dict[str, list[Record]] = {}
        self._unique_keys = dict(unique_keys or {})

    def _rows(self, entity: str) -> list[Record]:
        return self.tables.setdefault(entity, [])

    def _check_unique(self, entity: str, candidate: Record, ignore: Record | None = None) -> None:
        key = self._unique_keys.get(entity)
        if key is None:
            return
        for row in self._rows(entity):
            if row is not ignore and all(row.get(f) == candidate.get(f) for f in key):
                raise DuplicateEntityError(entity)

    async def create(
        self,
        entity: str,
        data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record:
        now = datetime.now(timezone.utc)
        row = {"id": str(uuid.uuid4()), "created_at": now, "updated_at": now, **data}
        self._check_unique(entity, row)
        self._rows(entity).append(row)
        return dict(row)

    async def find_many(
        self,
        entity: str,
        where: Predicate,
        order: Sequence[SortSpec] = (),
        skip: int = 0,
        take: int | None = None,
        relations: Sequence[RelationSpec] = (),
    ) -> list[Record]:
        rows = [r for r in self._rows(entity) if matches(r, where)]
        for spec in reversed(order):
            rows.sort(key=lambda r: r[spec.field], reverse=spec.direction == SortDirection.DESC)
        rows = rows[skip:]
        if take is not None:
            rows = rows[:take]
        return [dict(r) for r in rows]

    async def count(self, entity: str, where: Predicate) -> int:
        return sum(1 for r in self._rows(entity) if matches(r, where))

    async def find_first(
        self,
        entity: str,
        where: Predicate,
        relations: Sequence[RelationSpec] = (),
    ) -> Record | None:
        for row in self._rows(entity):
            if matches(row, where):
                return dict(row)
        return None

    async def update(
        self,
        entity: str,
        where: Predicate,
        data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record | None:
        for row in self._rows(entity):
            if matches(row, where):
                self._check_unique(entity, {**row, **data}, ignore=row)
                row.update(data, updated_at=datetime.now(timezone.utc))
                return dict(row)
        return None

    async def delete(self, entity: str, where: Predicate) -> bool:
        rows = self._rows(entity)
        kept = [r for r in rows if not matches(r, where)]
        self.tables[entity] = kept
        return len(kept) != len(rows)

    async def upsert(
        self,
        entity: str,
        unique_key: AllOf,
        update_data: Mapping[str, Any],
        create_data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record:
        for row in self._rows(entity):
            if matches(row, unique_key):
                row.update(update_data, updated_at=datetime.now(timezone.utc))
                return dict(row)
        return await self.create(entity, create_data)


@pytest.fixture
def store() -> FakeRecordStore:
    return FakeRecordStore(unique_keys={"daily_logs": ("user_id", "date")})
