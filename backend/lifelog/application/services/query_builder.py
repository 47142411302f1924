"""Translate raw list parameters into an owner-scoped QuerySpec.

Recognised parameters:

    page, limit          positive integers, falling back to defaults;
                         page is capped at MAX_PAGE
    search               OR across the descriptor's search fields
    startDate, endDate   inclusive bounds on the descriptor's date field

Every other non-empty parameter becomes an equality filter on the column of
the same name. The ownership condition is appended last; a parameter named
after the owner column is discarded.
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from lifelog.domain.entities import (
    AnyOf,
    Condition,
    EntityDescriptor,
    Operator,
    QuerySpec,
    eq,
    owned,
)
from lifelog.domain.exceptions import InvalidRecordError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
# Keeps (page - 1) * limit well inside a 64-bit OFFSET
MAX_PAGE = 1_000_000
MAX_LIMIT = 100

RESERVED_PARAMS = frozenset({"page", "limit", "search", "startDate", "endDate"})


def parse_positive_int(raw: Any, default: int) -> int:
    """Parse ``raw`` as an integer >= 1, returning ``default`` otherwise."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


def parse_date_bound(raw: Any, param: str) -> date | datetime:
    """Parse an ISO date or datetime string used as a range bound."""
    if isinstance(raw, (date, datetime)):
        return raw
    text = str(raw).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise InvalidRecordError(f"{param}: invalid date '{text}'") from None


def build_query(
    descriptor: EntityDescriptor,
    params: Mapping[str, Any],
    owner_id: str,
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> QuerySpec:
    """Build the QuerySpec for one list request."""
    page = min(parse_positive_int(params.get("page"), DEFAULT_PAGE), MAX_PAGE)
    limit = min(parse_positive_int(params.get("limit"), default_limit), max_limit)

    clauses: list[Condition | AnyOf] = []

    start = params.get("startDate")
    end = params.get("endDate")
    if start:
        clauses.append(
            Condition(descriptor.date_field, Operator.GTE, parse_date_bound(start, "startDate"))
        )
    if end:
        clauses.append(
            Condition(descriptor.date_field, Operator.LTE, parse_date_bound(end, "endDate"))
        )

    search = params.get("search")
    if search and descriptor.search_fields:
        term = str(search)
        clauses.append(
            AnyOf(tuple(Condition(f, Operator.CONTAINS, term) for f in descriptor.search_fields))
        )

    for key, value in params.items():
        if key in RESERVED_PARAMS or key == descriptor.owner_field:
            continue
        if value is None or value == "":
            continue
        clauses.append(eq(key, value))

    return QuerySpec(
        where=owned(descriptor.owner_field, owner_id, *clauses),
        page=page,
        limit=limit,
    )
