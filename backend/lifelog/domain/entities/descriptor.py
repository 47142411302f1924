"""Entity descriptors — static declarations of an entity's queryable surface."""

from dataclasses import dataclass
from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortSpec:
    """Order records by one column."""

    field: str
    direction: SortDirection = SortDirection.DESC


@dataclass(frozen=True)
class RelationSpec:
    """A related collection (or parent) attached to every read of an entity.

    ``order_by`` and ``limit`` only apply to one-to-many relations.
    """

    name: str
    order_by: SortSpec | None = None
    limit: int | None = None


@dataclass(frozen=True)
class ChildSpec:
    """A child collection reachable only through its owning parent record.

    When ``carries_owner`` is set the child row has its own owner column,
    which is filled from the caller identity on creation.
    """

    name: str
    entity: str
    foreign_key: str
    label: str
    carries_owner: bool = False


@dataclass(frozen=True)
class EntityDescriptor:
    """Immutable per-entity configuration consumed by the resource engine.

    Attributes:
        entity: Table name the record store uses to address the entity.
        label: Human-readable name used in response messages.
        search_fields: Columns matched (OR, case-insensitive substring) by ``search``.
        date_field: Column used for ``startDate``/``endDate`` and per-day keys.
        order_by: Default ordering of list reads.
        relations: Related records attached to every read.
        upsert_by_date: Entity keeps at most one record per owner per date.
        children: Child collections, each addressed by its route segment name.
        owner_field: Column holding the owning user's id.
    """

    entity: str
    label: str
    search_fields: tuple[str, ...] = ()
    date_field: str = "date"
    order_by: tuple[SortSpec, ...] = (SortSpec("created_at"),)
    relations: tuple[RelationSpec, ...] = ()
    upsert_by_date: bool = False
    children: tuple[ChildSpec, ...] = ()
    owner_field: str = "user_id"

    def child(self, name: str) -> ChildSpec:
        """Return the child spec registered under ``name``."""
        for spec in self.children:
            if spec.name == name:
                return spec
        raise ValueError(f"{self.label} has no child collection '{name}'")
