"""Unit tests for the response envelope helpers."""

from lifelog.domain.entities import RecordPage
from lifelog.presentation.api.responses import failure, paginated, success


def test_paginated_meta_uses_total_pages_alias():
    body = paginated(RecordPage(items=[{"id": "a"}], page=2, limit=10, total=25))

    dumped = body.model_dump(by_alias=True)
    assert dumped["success"] is True
    assert dumped["data"] == [{"id": "a"}]
    assert dumped["meta"] == {"page": 2, "limit": 10, "total": 25, "totalPages": 3}


def test_success_carries_message_and_no_error():
    body = success({"id": "a"}, "Note created successfully")

    assert body.message == "Note created successfully"
    assert body.error is None


def test_failure_has_error_only():
    assert failure("Goal with id 'x' not found") == {
        "success": False,
        "error": "Goal with id 'x' not found",
    }
