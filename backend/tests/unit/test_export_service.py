"""Unit tests for ExportService."""

from datetime import date

import pytest

from lifelog.application.services import ExportService
from lifelog.application.services.export_service import EXPORT_TABLES, to_csv
from lifelog.domain.exceptions import InvalidRecordError


async def _seed(store):
    alice_workout = await store.create(
        "workout_sessions", {"user_id": "alice", "date": date(2024, 1, 5)}
    )
    bob_workout = await store.create(
        "workout_sessions", {"user_id": "bob", "date": date(2024, 1, 6)}
    )
    await store.create(
        "workout_sets", {"workout_session_id": alice_workout["id"], "exercise_name": "Squat"}
    )
    await store.create(
        "workout_sets", {"workout_session_id": bob_workout["id"], "exercise_name": "Bench"}
    )
    item = await store.create("masters_prep_items", {"user_id": "alice", "task_title": "SOP"})
    await store.create(
        "masters_prep_sessions", {"user_id": "alice", "prep_item_id": item["id"], "date": date(2024, 1, 5)}
    )
    await store.create("daily_logs", {"user_id": "bob", "date": date(2024, 1, 5)})


def test_export_tables_cover_parents_and_children():
    assert "workout_sets" in EXPORT_TABLES
    assert "ielts_mistakes" in EXPORT_TABLES
    assert "masters_prep_sessions" in EXPORT_TABLES
    assert len(EXPORT_TABLES) == len(set(EXPORT_TABLES)) == 19


@pytest.mark.asyncio
async def test_full_export_is_owner_scoped(store):
    await _seed(store)

    result = await ExportService(store).export_json("alice")

    tables = result["tables"]
    assert result["format"] == "json"
    assert result["userId"] == "alice"
    assert set(tables) == set(EXPORT_TABLES)
    assert [s["exercise_name"] for s in tables["workout_sets"]] == ["Squat"]
    assert len(tables["workout_sessions"]) == 1
    assert len(tables["masters_prep_sessions"]) == 1
    assert tables["daily_logs"] == []
    assert tables["ielts_mistakes"] == []


@pytest.mark.asyncio
async def test_single_child_table_is_read_through_owned_parents(store):
    await _seed(store)

    result = await ExportService(store).export_json("alice", "workout_sets")

    assert set(result) == {"format", "table", "exportedAt", "data"}
    assert result["table"] == "workout_sets"
    assert [s["exercise_name"] for s in result["data"]] == ["Squat"]


@pytest.mark.asyncio
async def test_unknown_table_is_rejected(store):
    with pytest.raises(InvalidRecordError):
        await ExportService(store).export_json("alice", "quizzes")


@pytest.mark.asyncio
async def test_summary_counts_rows_per_table(store):
    await _seed(store)

    summary = await ExportService(store).summary("alice")

    assert summary["counts"]["workout_sessions"] == 1
    assert summary["counts"]["workout_sets"] == 1
    assert summary["counts"]["daily_logs"] == 0
    assert summary["totalRecords"] == 4


@pytest.mark.asyncio
async def test_csv_export_of_one_table(store):
    await store.create(
        "journal_entries", {"user_id": "alice", "date": date(2024, 1, 5), "title": 'Say "hi", world'}
    )

    body = await ExportService(store).export_csv("alice", "journal_entries")

    header, row = body.splitlines()
    assert header.split(",")[:3] == ["id", "created_at", "updated_at"]
    assert '"Say ""hi"", world"' in row


def test_csv_of_no_records_is_empty():
    assert to_csv([]) == ""


def test_csv_renders_none_as_empty_cell():
    assert to_csv([{"a": None, "b": 1}]) == "a,b\n,1\n"
