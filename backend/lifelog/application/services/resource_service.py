"""Application service (use case) — generic, ownership-scoped CRUD for one entity.

One ResourceService is built per request for a given EntityDescriptor. Every
predicate it hands to the record store carries the owner condition; child
records are reached only after their parent has been verified as owned.
"""

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from lifelog.application.interfaces import Record, RecordStore
from lifelog.application.services.query_builder import DEFAULT_LIMIT, MAX_LIMIT, build_query
from lifelog.domain.entities import (
    AllOf,
    Condition,
    EntityDescriptor,
    RecordPage,
    eq,
    owned,
)
from lifelog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

# Columns a payload may never set
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class ResourceService:
    """Orchestrates CRUD, search and per-day upsert for one entity descriptor."""

    def __init__(
        self,
        store: RecordStore,
        descriptor: EntityDescriptor,
        *,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ):
        self._store = store
        self._descriptor = descriptor
        self._default_limit = default_limit
        self._max_limit = max_limit

    @property
    def descriptor(self) -> EntityDescriptor:
        return self._descriptor

    # ── Helpers ──────────────────────────────────────────────────────

    def _owned(self, owner_id: str, *clauses: Condition) -> AllOf:
        return owned(self._descriptor.owner_field, owner_id, *clauses)

    def _clean(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Drop identity, timestamp and owner columns from caller input."""
        return {
            key: value
            for key, value in payload.items()
            if key not in PROTECTED_FIELDS and key != self._descriptor.owner_field
        }

    async def _require_owned(self, owner_id: str, record_id: str) -> Record:
        record = await self._store.find_first(
            self._descriptor.entity, self._owned(owner_id, eq("id", record_id))
        )
        if record is None:
            raise EntityNotFoundError(self._descriptor.label, record_id)
        return record

    # ── Operations ───────────────────────────────────────────────────

    async def create_record(self, owner_id: str, payload: Mapping[str, Any]) -> Record:
        data = self._clean(payload)
        data[self._descriptor.owner_field] = owner_id
        record = await self._store.create(
            self._descriptor.entity, data, self._descriptor.relations
        )
        logger.debug("Created %s %s", self._descriptor.entity, record.get("id"))
        return record

    async def list_records(self, owner_id: str, params: Mapping[str, Any]) -> RecordPage:
        query = build_query(
            self._descriptor,
            params,
            owner_id,
            default_limit=self._default_limit,
            max_limit=self._max_limit,
        )
        items = await self._store.find_many(
            self._descriptor.entity,
            query.where,
            order=self._descriptor.order_by,
            skip=query.skip,
            take=query.limit,
            relations=self._descriptor.relations,
        )
        total = await self._store.count(self._descriptor.entity, query.where)
        return RecordPage(items=items, page=query.page, limit=query.limit, total=total)

    async def get_record(self, owner_id: str, record_id: str) -> Record:
        record = await self._store.find_first(
            self._descriptor.entity,
            self._owned(owner_id, eq("id", record_id)),
            self._descriptor.relations,
        )
        if record is None:
            raise EntityNotFoundError(self._descriptor.label, record_id)
        return record

    async def get_record_by_date(self, owner_id: str, on: date) -> Record:
        date_field = self._descriptor.date_field
        record = await self._store.find_first(
            self._descriptor.entity,
            self._owned(owner_id, eq(date_field, on)),
            self._descriptor.relations,
        )
        if record is None:
            raise EntityNotFoundError(self._descriptor.label, on.isoformat(), field=date_field)
        return record

    async def update_record(
        self, owner_id: str, record_id: str, patch: Mapping[str, Any]
    ) -> Record:
        existing = await self.get_record(owner_id, record_id)
        data = self._clean(patch)
        if not data:
            return existing

        # The write repeats the owner condition, so a concurrent delete
        # between the check and the write surfaces as not-found.
        record = await self._store.update(
            self._descriptor.entity,
            self._owned(owner_id, eq("id", record_id)),
            data,
            self._descriptor.relations,
        )
        if record is None:
            logger.warning(
                "%s %s disappeared before update", self._descriptor.entity, record_id
            )
            raise EntityNotFoundError(self._descriptor.label, record_id)
        logger.debug("Updated %s %s", self._descriptor.entity, record_id)
        return record

    async def delete_record(self, owner_id: str, record_id: str) -> None:
        await self._require_owned(owner_id, record_id)
        deleted = await self._store.delete(
            self._descriptor.entity, self._owned(owner_id, eq("id", record_id))
        )
        if not deleted:
            logger.warning(
                "%s %s disappeared before delete", self._descriptor.entity, record_id
            )
            raise EntityNotFoundError(self._descriptor.label, record_id)
        logger.debug("Deleted %s %s", self._descriptor.entity, record_id)

    async def upsert_record_by_date(
        self, owner_id: str, on: date, payload: Mapping[str, Any]
    ) -> Record:
        if not self._descriptor.upsert_by_date:
            raise ValueError(f"{self._descriptor.label} is not keyed by date")

        date_field = self._descriptor.date_field
        update_data = self._clean(payload)
        update_data.pop(date_field, None)
        create_data = {
            **update_data,
            self._descriptor.owner_field: owner_id,
            date_field: on,
        }
        record = await self._store.upsert(
            self._descriptor.entity,
            unique_key=self._owned(owner_id, eq(date_field, on)),
            update_data=update_data,
            create_data=create_data,
            relations=self._descriptor.relations,
        )
        logger.debug("Upserted %s for %s", self._descriptor.entity, on.isoformat())
        return record

    async def add_child_record(
        self,
        owner_id: str,
        parent_id: str,
        child: str,
        payload: Mapping[str, Any],
    ) -> Record:
        spec = self._descriptor.child(child)
        await self._require_owned(owner_id, parent_id)

        data = self._clean(payload)
        data[spec.foreign_key] = parent_id
        if spec.carries_owner:
            data[self._descriptor.owner_field] = owner_id
        record = await self._store.create(spec.entity, data)
        logger.debug("Added %s %s to %s", spec.entity, record.get("id"), parent_id)
        return record

    async def delete_child_record(
        self,
        owner_id: str,
        parent_id: str,
        child: str,
        child_id: str,
    ) -> None:
        spec = self._descriptor.child(child)
        await self._require_owned(owner_id, parent_id)

        where = AllOf((eq("id", child_id), eq(spec.foreign_key, parent_id)))
        if spec.carries_owner:
            where = where.and_(eq(self._descriptor.owner_field, owner_id))
        deleted = await self._store.delete(spec.entity, where)
        if not deleted:
            raise EntityNotFoundError(spec.label, child_id)
