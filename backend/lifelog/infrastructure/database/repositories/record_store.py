"""Concrete RecordStore backed by SQLAlchemy async sessions.

Entities are resolved by table name from the ORM registry. Predicates are
compiled to SQL expressions, with filter values coerced to the column's
Python type first; a field the table does not have, or a value that cannot
be coerced, compiles to a predicate that matches nothing.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from datetime import date, datetime, time, timezone
from functools import lru_cache
from typing import Any

from sqlalchemy import (
    ColumnElement,
    and_,
    delete,
    false,
    func,
    inspect,
    or_,
    select,
    true,
    update,
)
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

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
from lifelog.domain.exceptions import (
    DuplicateEntityError,
    InvalidRecordError,
    StoreUnavailableError,
)
from lifelog.infrastructure.database import models  # noqa: F401  (registers mappers)
from lifelog.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION = "23505"
_FOREIGN_KEY_VIOLATION = "23503"

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


@lru_cache(maxsize=1)
def _model_registry() -> dict[str, type[Base]]:
    return {
        mapper.class_.__tablename__: mapper.class_ for mapper in Base.registry.mappers
    }


def _python_type(column) -> type | None:
    try:
        return column.type.python_type
    except NotImplementedError:
        return None


def _coerce(column, value: Any, *, upper_bound: bool = False) -> Any:
    """Convert ``value`` to the Python type of ``column``.

    A bare date compared against a timestamp column covers the whole day:
    as a lower bound it means midnight, as an upper bound the last instant.
    Raises ValueError or TypeError when the value cannot be converted.
    """
    if value is None:
        return None
    target = _python_type(column)
    if target is None or isinstance(value, target) and not (
        target is int and isinstance(value, bool)
    ):
        if target is date and isinstance(value, datetime):
            return value.date()
        return value

    if target is datetime:
        if isinstance(value, date):
            return datetime.combine(
                value, time.max if upper_bound else time.min, tzinfo=timezone.utc
            )
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if target is date:
        text = str(value)
        try:
            return date.fromisoformat(text)
        except ValueError:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    if target is bool:
        text = str(value).strip().lower()
        if text in ("true", "1", "yes"):
            return True
        if text in ("false", "0", "no"):
            return False
        raise ValueError(f"not a boolean: {value!r}")
    if target is int:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"not an integer: {value!r}")
        return int(value)
    if target is float:
        return float(value)
    if target is str:
        if isinstance(value, (dict, list, tuple, set)):
            raise TypeError(f"not a string: {value!r}")
        return str(value)
    return target(value)


def _sort_key(field_name: str):
    return lambda item: getattr(item, field_name)


def _order_related(items: list, spec: RelationSpec) -> list:
    if spec.order_by is not None:
        field_name = spec.order_by.field
        present = [item for item in items if getattr(item, field_name) is not None]
        missing = [item for item in items if getattr(item, field_name) is None]
        present.sort(
            key=_sort_key(field_name),
            reverse=spec.order_by.direction == SortDirection.DESC,
        )
        items = present + missing
    if spec.limit is not None:
        items = items[: spec.limit]
    return items


class SQLAlchemyRecordStore(RecordStore):
    """Implements the RecordStore port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    # ── Mapping ──────────────────────────────────────────────────────

    def _model(self, entity: str) -> type[Base]:
        try:
            return _model_registry()[entity]
        except KeyError:
            raise ValueError(f"Unknown entity '{entity}'") from None

    @staticmethod
    def _columns(obj: Base) -> Record:
        """Map ORM instance → plain dict of its column values."""
        return {
            attr.key: getattr(obj, attr.key) for attr in inspect(type(obj)).column_attrs
        }

    def _to_record(self, obj: Base, relations: Sequence[RelationSpec]) -> Record:
        record = self._columns(obj)
        mapper_relations = inspect(type(obj)).relationships
        for spec in relations:
            related = getattr(obj, spec.name)
            if mapper_relations[spec.name].uselist:
                record[spec.name] = [
                    self._columns(item) for item in _order_related(list(related), spec)
                ]
            else:
                record[spec.name] = self._columns(related) if related is not None else None
        return record

    def _values(self, model: type[Base], data: Mapping[str, Any]) -> dict[str, Any]:
        """Validate and coerce write values against the model's columns."""
        columns = inspect(model).columns
        unknown = sorted(key for key in data if key not in columns)
        if unknown:
            raise InvalidRecordError(
                f"{model.__tablename__}: unknown field(s) {', '.join(unknown)}"
            )
        values = {}
        for key, value in data.items():
            try:
                values[key] = _coerce(columns[key], value)
            except (TypeError, ValueError):
                raise InvalidRecordError(f"{key}: invalid value {value!r}") from None
        return values

    # ── Predicate compilation ────────────────────────────────────────

    def _compile(self, model: type[Base], predicate: Predicate) -> ColumnElement[bool]:
        if isinstance(predicate, AllOf):
            return and_(true(), *(self._compile(model, c) for c in predicate.clauses))
        if isinstance(predicate, AnyOf):
            return or_(false(), *(self._compile(model, c) for c in predicate.conditions))
        return self._compile_condition(model, predicate)

    def _compile_condition(
        self, model: type[Base], condition: Condition
    ) -> ColumnElement[bool]:
        column = inspect(model).columns.get(condition.field)
        if column is None:
            logger.debug("%s has no column '%s'", model.__tablename__, condition.field)
            return false()
        try:
            value = _coerce(
                column, condition.value, upper_bound=condition.op == Operator.LTE
            )
        except (TypeError, ValueError):
            logger.debug(
                "Value %r does not fit %s.%s",
                condition.value,
                model.__tablename__,
                condition.field,
            )
            return false()

        if condition.op == Operator.EQ:
            return column.is_(None) if value is None else column == value
        if value is None:
            return false()
        if condition.op == Operator.CONTAINS:
            if _python_type(column) is not str:
                return false()
            return column.icontains(value, autoescape=True)
        if condition.op == Operator.GTE:
            return column >= value
        if condition.op == Operator.LTE:
            return column <= value
        raise ValueError(f"Unsupported operator {condition.op}")

    def _order(self, model: type[Base], order: Sequence[SortSpec]) -> list:
        columns = inspect(model).columns
        clauses = []
        for spec in order:
            column = columns[spec.field]
            clauses.append(column.desc() if spec.direction == SortDirection.DESC else column.asc())
        clauses.append(columns["id"].asc())
        return clauses

    def _loaders(self, model: type[Base], relations: Sequence[RelationSpec]) -> list:
        return [selectinload(getattr(model, spec.name)) for spec in relations]

    # ── Error translation ────────────────────────────────────────────

    @contextmanager
    def _translate_errors(self, entity: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            orig = exc.orig
            code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
            message = str(orig).lower()
            if code == _UNIQUE_VIOLATION or "unique constraint" in message:
                raise DuplicateEntityError(entity) from exc
            if code == _FOREIGN_KEY_VIOLATION or "foreign key constraint" in message:
                raise InvalidRecordError(
                    f"{entity}: referenced record does not exist"
                ) from exc
            raise InvalidRecordError(f"{entity}: {orig}") from exc
        except (DBAPIError, SQLAlchemyError, TimeoutError) as exc:
            logger.error("Store operation on %s failed: %s", entity, exc)
            raise StoreUnavailableError(f"Store operation on {entity} failed") from exc

    async def _fetch_one(
        self,
        model: type[Base],
        clause: ColumnElement[bool],
        relations: Sequence[RelationSpec],
    ) -> Record | None:
        stmt = (
            select(model)
            .where(clause)
            .options(*self._loaders(model, relations))
            .limit(1)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        obj = result.scalars().first()
        return self._to_record(obj, relations) if obj is not None else None

    # ── Port implementation ──────────────────────────────────────────

    async def create(
        self,
        entity: str,
        data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record:
        model = self._model(entity)
        obj = model(**self._values(model, data))
        with self._translate_errors(entity):
            self._session.add(obj)
            await self._session.flush()
            return await self._fetch_one(model, model.id == obj.id, relations)

    async def find_many(
        self,
        entity: str,
        where: Predicate,
        order: Sequence[SortSpec] = (),
        skip: int = 0,
        take: int | None = None,
        relations: Sequence[RelationSpec] = (),
    ) -> list[Record]:
        model = self._model(entity)
        stmt = (
            select(model)
            .where(self._compile(model, where))
            .options(*self._loaders(model, relations))
            .order_by(*self._order(model, order))
            .offset(skip)
            .execution_options(populate_existing=True)
        )
        if take is not None:
            stmt = stmt.limit(take)
        with self._translate_errors(entity):
            result = await self._session.execute(stmt)
            return [self._to_record(obj, relations) for obj in result.scalars().all()]

    async def count(self, entity: str, where: Predicate) -> int:
        model = self._model(entity)
        stmt = select(func.count()).select_from(model).where(self._compile(model, where))
        with self._translate_errors(entity):
            result = await self._session.execute(stmt)
            return result.scalar_one()

    async def find_first(
        self,
        entity: str,
        where: Predicate,
        relations: Sequence[RelationSpec] = (),
    ) -> Record | None:
        model = self._model(entity)
        with self._translate_errors(entity):
            return await self._fetch_one(model, self._compile(model, where), relations)

    async def update(
        self,
        entity: str,
        where: Predicate,
        data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record | None:
        model = self._model(entity)
        values = self._values(model, data)
        clause = self._compile(model, where)
        with self._translate_errors(entity):
            target = await self._session.execute(select(model.id).where(clause).limit(1))
            record_id = target.scalar_one_or_none()
            if record_id is None:
                return None
            stmt = (
                update(model)
                .where(model.id == record_id, clause)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            result = await self._session.execute(stmt)
            if result.rowcount == 0:
                return None
            return await self._fetch_one(model, model.id == record_id, relations)

    async def delete(self, entity: str, where: Predicate) -> bool:
        model = self._model(entity)
        stmt = (
            delete(model)
            .where(self._compile(model, where))
            .execution_options(synchronize_session=False)
        )
        with self._translate_errors(entity):
            result = await self._session.execute(stmt)
            return result.rowcount > 0

    async def upsert(
        self,
        entity: str,
        unique_key: AllOf,
        update_data: Mapping[str, Any],
        create_data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record:
        model = self._model(entity)
        key_fields = []
        for clause in unique_key.clauses:
            if not isinstance(clause, Condition) or clause.op != Operator.EQ:
                raise ValueError("Upsert keys must be equality conditions")
            key_fields.append(clause.field)

        dialect = self._session.get_bind().dialect.name
        try:
            insert = _UPSERT_INSERTS[dialect]
        except KeyError:
            raise StoreUnavailableError(f"Upsert is not supported on {dialect}") from None

        stmt = insert(model).values(**self._values(model, create_data))
        stmt = stmt.on_conflict_do_update(
            index_elements=key_fields,
            set_={
                **self._values(model, update_data),
                "updated_at": datetime.now(timezone.utc),
            },
        )
        with self._translate_errors(entity):
            await self._session.execute(stmt)
            record = await self._fetch_one(
                model, self._compile(model, unique_key), relations
            )
        if record is None:
            raise StoreUnavailableError(f"Upserted {entity} record could not be read back")
        return record
