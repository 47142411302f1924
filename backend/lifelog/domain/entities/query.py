"""Store-agnostic predicates and list query results."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class Operator(str, Enum):
    EQ = "eq"
    CONTAINS = "contains"  # case-insensitive substring
    GTE = "gte"
    LTE = "lte"


@dataclass(frozen=True)
class Condition:
    """A single comparison between a column and a value."""

    field: str
    op: Operator
    value: Any


@dataclass(frozen=True)
class AnyOf:
    """Disjunction of conditions — used for free-text search."""

    conditions: tuple[Condition, ...]


@dataclass(frozen=True)
class AllOf:
    """Conjunction of clauses — the root of every store predicate."""

    clauses: tuple[Union[Condition, AnyOf], ...] = ()

    def and_(self, *clauses: Union[Condition, AnyOf]) -> "AllOf":
        return AllOf(self.clauses + clauses)


Predicate = Union[Condition, AnyOf, AllOf]


def eq(field_name: str, value: Any) -> Condition:
    return Condition(field_name, Operator.EQ, value)


def owned(owner_field: str, owner_id: str, *clauses: Union[Condition, AnyOf]) -> AllOf:
    """Build a predicate with the ownership condition appended last."""
    return AllOf(tuple(clauses) + (eq(owner_field, owner_id),))


@dataclass(frozen=True)
class QuerySpec:
    """Resolved pagination and filtering for one list read."""

    where: AllOf
    page: int = 1
    limit: int = 20

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class RecordPage:
    """One page of records plus the information needed for pagination metadata."""

    items: list[dict[str, Any]] = field(default_factory=list)
    page: int = 1
    limit: int = 20
    total: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0
