"""Abstract record store interface (port) — generic, table-addressed persistence."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from lifelog.domain.entities import AllOf, Predicate, RelationSpec, SortSpec

Record = dict[str, Any]


class RecordStore(ABC):
    """Port for entity-agnostic persistence — implemented in the infrastructure layer.

    Entities are addressed by table name. Records are plain dicts keyed by
    column name, with requested relations attached under their relation name.
    """

    @abstractmethod
    async def create(
        self,
        entity: str,
        data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record:
        """Insert a record and return it with its generated id."""
        ...

    @abstractmethod
    async def find_many(
        self,
        entity: str,
        where: Predicate,
        order: Sequence[SortSpec] = (),
        skip: int = 0,
        take: int | None = None,
        relations: Sequence[RelationSpec] = (),
    ) -> list[Record]:
        """Return the records matching ``where``, ordered and sliced."""
        ...

    @abstractmethod
    async def count(self, entity: str, where: Predicate) -> int:
        """Return the number of records matching ``where``."""
        ...

    @abstractmethod
    async def find_first(
        self,
        entity: str,
        where: Predicate,
        relations: Sequence[RelationSpec] = (),
    ) -> Record | None:
        """Return one record matching ``where`` or None."""
        ...

    @abstractmethod
    async def update(
        self,
        entity: str,
        where: Predicate,
        data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record | None:
        """Apply ``data`` to the single record matching ``where``.

        Returns None when no record matched at write time.
        """
        ...

    @abstractmethod
    async def delete(self, entity: str, where: Predicate) -> bool:
        """Delete the records matching ``where``. Returns False if none matched."""
        ...

    @abstractmethod
    async def upsert(
        self,
        entity: str,
        unique_key: AllOf,
        update_data: Mapping[str, Any],
        create_data: Mapping[str, Any],
        relations: Sequence[RelationSpec] = (),
    ) -> Record:
        """Atomically update the record identified by ``unique_key`` or create it.

        ``unique_key`` must consist of equality conditions covering a unique
        constraint of the entity.
        """
        ...
