from .descriptor import (
    ChildSpec,
    EntityDescriptor,
    RelationSpec,
    SortDirection,
    SortSpec,
)
from .query import (
    AllOf,
    AnyOf,
    Condition,
    Operator,
    Predicate,
    QuerySpec,
    RecordPage,
    eq,
    owned,
)
from .user import User

__all__ = [
    "ChildSpec",
    "EntityDescriptor",
    "RelationSpec",
    "SortDirection",
    "SortSpec",
    "AllOf",
    "AnyOf",
    "Condition",
    "Operator",
    "Predicate",
    "QuerySpec",
    "RecordPage",
    "eq",
    "owned",
    "User",
]
