"""Unit tests for list-parameter → QuerySpec translation."""

from datetime import date, datetime, timezone

import pytest

from lifelog.application.services.query_builder import (
    MAX_PAGE,
    build_query,
    parse_date_bound,
    parse_positive_int,
)
from lifelog.domain.entities import (
    AnyOf,
    Condition,
    EntityDescriptor,
    Operator,
    eq,
)
from lifelog.domain.exceptions import InvalidRecordError

NOTES = EntityDescriptor(
    entity="notes",
    label="Note",
    search_fields=("title", "body"),
)
UNSEARCHABLE = EntityDescriptor(entity="counters", label="Counter")


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 7), ("3", 3), (" 12 ", 12), ("0", 7), ("-2", 7), ("abc", 7), ("2.5", 7), (True, 7), (4, 4)],
)
def test_parse_positive_int(raw, expected):
    assert parse_positive_int(raw, 7) == expected


def test_parse_date_bound_accepts_dates_and_datetimes():
    assert parse_date_bound("2024-01-05", "startDate") == date(2024, 1, 5)
    assert parse_date_bound("2024-01-05T10:30:00Z", "startDate") == datetime(
        2024, 1, 5, 10, 30, tzinfo=timezone.utc
    )


def test_parse_date_bound_rejects_garbage():
    with pytest.raises(InvalidRecordError, match="endDate"):
        parse_date_bound("next tuesday", "endDate")


def test_defaults_when_params_missing():
    query = build_query(NOTES, {}, "alice")

    assert query.page == 1
    assert query.limit == 20
    assert query.skip == 0
    assert query.where.clauses == (eq("user_id", "alice"),)


def test_pagination_skip():
    query = build_query(NOTES, {"page": "3", "limit": "10"}, "alice")

    assert (query.page, query.limit, query.skip) == (3, 10, 20)


def test_invalid_pagination_falls_back_to_defaults():
    query = build_query(NOTES, {"page": "zero", "limit": "-5"}, "alice", default_limit=15)

    assert query.page == 1
    assert query.limit == 15


def test_limit_is_capped():
    query = build_query(NOTES, {"limit": "500"}, "alice", max_limit=100)

    assert query.limit == 100


def test_huge_page_and_limit_are_clamped_to_a_64_bit_offset():
    query = build_query(
        NOTES, {"page": "100000000000000000000", "limit": str(10**20)}, "alice"
    )

    assert query.page == MAX_PAGE
    assert query.limit == 100
    assert query.skip == (MAX_PAGE - 1) * 100
    assert query.skip < 2**63


def test_date_range_is_inclusive_on_date_field():
    query = build_query(NOTES, {"startDate": "2024-01-01", "endDate": "2024-01-31"}, "alice")

    assert Condition("date", Operator.GTE, date(2024, 1, 1)) in query.where.clauses
    assert Condition("date", Operator.LTE, date(2024, 1, 31)) in query.where.clauses


def test_search_is_or_across_declared_fields():
    query = build_query(NOTES, {"search": "Focus"}, "alice")

    search = [c for c in query.where.clauses if isinstance(c, AnyOf)]
    assert search == [
        AnyOf(
            (
                Condition("title", Operator.CONTAINS, "Focus"),
                Condition("body", Operator.CONTAINS, "Focus"),
            )
        )
    ]


def test_search_ignored_without_search_fields():
    query = build_query(UNSEARCHABLE, {"search": "x"}, "alice")

    assert not any(isinstance(c, AnyOf) for c in query.where.clauses)


def test_extra_params_become_equality_filters():
    query = build_query(NOTES, {"status": "done", "category": "", "page": "1"}, "alice")

    assert eq("status", "done") in query.where.clauses
    assert all(getattr(c, "field", None) != "category" for c in query.where.clauses)
    assert all(getattr(c, "field", None) != "page" for c in query.where.clauses)


def test_owner_condition_is_last_and_cannot_be_overridden():
    query = build_query(NOTES, {"user_id": "bob", "status": "done"}, "alice")

    assert query.where.clauses[-1] == eq("user_id", "alice")
    assert eq("user_id", "bob") not in query.where.clauses
