"""Unit tests for the read-only aggregation service."""

from datetime import date

import pytest

from lifelog.application.services import StatsService, compute_wellness_score


def test_wellness_score_is_mean_of_present_scores():
    assert compute_wellness_score({"sleep_quality": 8, "mood_score": 6, "energy_level": None}) == 7
    assert compute_wellness_score({"wellness_note": "tired"}) is None


@pytest.fixture
def stats(store) -> StatsService:
    return StatsService(store)


@pytest.mark.asyncio
async def test_goal_stats(store, stats: StatsService):
    for status, category in [
        ("achieved", "career"),
        ("in_progress", "career"),
        ("achieved", "health"),
        ("dropped", "health"),
    ]:
        await store.create(
            "goals", {"user_id": "alice", "status": status, "category": category, "title": "g"}
        )
    await store.create(
        "goals", {"user_id": "bob", "status": "achieved", "category": "career", "title": "g"}
    )

    result = await stats.goal_stats("alice")

    assert result["total"] == 4
    assert result["achieved"] == 2
    assert result["successRate"] == 50
    assert result["byCategory"]["career"] == {"total": 2, "achieved": 1, "inProgress": 1}


@pytest.mark.asyncio
async def test_financial_stats_respects_date_range(store, stats: StatsService):
    rows = [
        ("income", 1000.0, "salary", date(2024, 1, 1)),
        ("spend", 200.0, "food", date(2024, 1, 2)),
        ("spend", 100.0, "food", date(2024, 1, 3)),
        ("invest", 300.0, "stocks", date(2024, 1, 4)),
        ("spend", 999.0, "travel", date(2024, 2, 1)),
    ]
    for direction, amount, category, day in rows:
        await store.create(
            "financial_transactions",
            {
                "user_id": "alice",
                "direction": direction,
                "amount_idr": amount,
                "category": category,
                "date": day,
                "is_necessary": category == "food",
            },
        )

    result = await stats.financial_stats("alice", "2024-01-01", "2024-01-31")

    assert result["totalTransactions"] == 4
    assert result["summary"]["netBalance"] == 400
    assert result["summary"]["savingsRate"] == pytest.approx(70)
    assert result["spending"]["byCategory"] == {"food": 300}
    assert result["spending"]["necessaryPercentage"] == 100


@pytest.mark.asyncio
async def test_weekly_summary_window(store, stats: StatsService):
    for day, score in [(date(2024, 1, 1), 6), (date(2024, 1, 7), 8), (date(2024, 1, 8), 1)]:
        await store.create(
            "daily_logs", {"user_id": "alice", "date": day, "day_score": score, "work_hours": 2.0}
        )

    result = await stats.weekly_summary("alice", "2024-01-01")

    assert result["totalDays"] == 2
    assert result["averageDayScore"] == 7
    assert result["totalWorkHours"] == 4
    assert result["endDate"] == "2024-01-07"


@pytest.mark.asyncio
async def test_workout_stats_by_type(store, stats: StatsService):
    for workout_type, minutes in [("run", 30), ("run", 20), ("gym", 60)]:
        await store.create(
            "workout_sessions",
            {
                "user_id": "alice",
                "date": date(2024, 1, 1),
                "workout_type": workout_type,
                "duration_min": minutes,
                "intensity_level": 5,
            },
        )

    result = await stats.workout_stats("alice")

    assert result["totalSessions"] == 3
    assert result["totalMinutes"] == 110
    assert result["byType"]["run"]["sessions"] == 2
    assert result["byType"]["run"]["averageIntensity"] == 5


@pytest.mark.asyncio
async def test_weekly_summary_averages_include_zero_values(store, stats: StatsService):
    for day, mood in [(date(2024, 1, 1), 0), (date(2024, 1, 2), 6), (date(2024, 1, 3), None)]:
        await store.create("daily_logs", {"user_id": "alice", "date": day, "mood_score": mood})

    result = await stats.weekly_summary("alice", "2024-01-01")

    assert result["averageMoodScore"] == 3
