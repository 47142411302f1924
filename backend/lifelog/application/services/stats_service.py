"""Application service — read-only aggregations over a user's own records.

These reads bypass the resource engine but go through the same record store
and always carry the owner condition.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta, timezone
from typing import Any

from lifelog.application.interfaces import Record, RecordStore
from lifelog.application.services.descriptors import (
    DAILY_LOG,
    FINANCIAL_TRANSACTION,
    GOAL,
    WORKOUT_SESSION,
)
from lifelog.application.services.query_builder import parse_date_bound
from lifelog.domain.entities import (
    Condition,
    EntityDescriptor,
    Operator,
    SortDirection,
    SortSpec,
    owned,
)

# Scores averaged into a wellness entry's overall score
WELLNESS_SCORE_FIELDS = (
    "sleep_quality",
    "energy_level",
    "mood_score",
    "mental_clarity",
    "diet_discipline",
    "hygiene_score",
)


def compute_wellness_score(payload: Mapping[str, Any]) -> float | None:
    """Mean of the 1-10 scores present in ``payload``, or None when none are."""
    scores = [payload[f] for f in WELLNESS_SCORE_FIELDS if payload.get(f) is not None]
    return sum(scores) / len(scores) if scores else None


def _total(records: Iterable[Record], field_name: str) -> float:
    return sum(r.get(field_name) or 0 for r in records)


def _mean(records: Iterable[Record], field_name: str) -> float | None:
    values = [r[field_name] for r in records if r.get(field_name) is not None]
    return sum(values) / len(values) if values else None


def _percentage(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0


class StatsService:
    """Computes per-domain summaries from records owned by one user."""

    def __init__(self, store: RecordStore):
        self._store = store

    async def _owned_records(
        self,
        descriptor: EntityDescriptor,
        owner_id: str,
        *,
        start: Any = None,
        end: Any = None,
    ) -> list[Record]:
        clauses = []
        if start:
            clauses.append(
                Condition(descriptor.date_field, Operator.GTE, parse_date_bound(start, "startDate"))
            )
        if end:
            clauses.append(
                Condition(descriptor.date_field, Operator.LTE, parse_date_bound(end, "endDate"))
            )
        return await self._store.find_many(
            descriptor.entity,
            owned(descriptor.owner_field, owner_id, *clauses),
            order=(SortSpec(descriptor.date_field, SortDirection.ASC),),
        )

    async def goal_stats(self, owner_id: str) -> dict[str, Any]:
        goals = await self._owned_records(GOAL, owner_id)

        by_status: dict[str, int] = defaultdict(int)
        by_category: dict[str, dict[str, int]] = {}
        for goal in goals:
            by_status[goal["status"]] += 1
            category = by_category.setdefault(
                goal["category"], {"total": 0, "achieved": 0, "inProgress": 0}
            )
            category["total"] += 1
            if goal["status"] == "achieved":
                category["achieved"] += 1
            elif goal["status"] == "in_progress":
                category["inProgress"] += 1

        achieved = by_status.get("achieved", 0)
        return {
            "total": len(goals),
            "achieved": achieved,
            "inProgress": by_status.get("in_progress", 0),
            "notStarted": by_status.get("not_started", 0),
            "dropped": by_status.get("dropped", 0),
            "successRate": _percentage(achieved, len(goals)),
            "byStatus": dict(by_status),
            "byCategory": by_category,
        }

    async def workout_stats(
        self, owner_id: str, start: Any = None, end: Any = None
    ) -> dict[str, Any]:
        sessions = await self._owned_records(WORKOUT_SESSION, owner_id, start=start, end=end)

        grouped: dict[str, list[Record]] = defaultdict(list)
        for session in sessions:
            grouped[session["workout_type"]].append(session)
        by_type = {
            workout_type: {
                "sessions": len(items),
                "totalMinutes": _total(items, "duration_min"),
                "totalDistance": _total(items, "distance_km"),
                "averageIntensity": _mean(items, "intensity_level"),
            }
            for workout_type, items in grouped.items()
        }

        return {
            "totalSessions": len(sessions),
            "totalMinutes": _total(sessions, "duration_min"),
            "totalDistance": _total(sessions, "distance_km"),
            "totalCalories": _total(sessions, "calories"),
            "totalSteps": _total(sessions, "steps"),
            "averageQuality": _mean(sessions, "workout_quality"),
            "byType": by_type,
        }

    async def financial_stats(
        self, owner_id: str, start: Any = None, end: Any = None
    ) -> dict[str, Any]:
        transactions = await self._owned_records(
            FINANCIAL_TRANSACTION, owner_id, start=start, end=end
        )
        spending = [t for t in transactions if t["direction"] == "spend"]
        income = [t for t in transactions if t["direction"] == "income"]
        investments = [t for t in transactions if t["direction"] == "invest"]

        spending_by_category: dict[str, float] = defaultdict(float)
        by_payment_method: dict[str, float] = defaultdict(float)
        for t in spending:
            spending_by_category[t["category"]] += t["amount_idr"]
            if t.get("payment_method"):
                by_payment_method[t["payment_method"]] += t["amount_idr"]
        investment_by_type: dict[str, float] = defaultdict(float)
        for t in investments:
            if t.get("investment_type"):
                investment_by_type[t["investment_type"]] += t["amount_idr"]

        total_income = _total(income, "amount_idr")
        total_spending = _total(spending, "amount_idr")
        total_investment = _total(investments, "amount_idr")
        necessary = _total((t for t in spending if t.get("is_necessary")), "amount_idr")
        unnecessary = _total(
            (t for t in spending if t.get("is_necessary") is False), "amount_idr"
        )

        return {
            "totalTransactions": len(transactions),
            "summary": {
                "totalIncome": total_income,
                "totalSpending": total_spending,
                "totalInvestment": total_investment,
                "netBalance": total_income - total_spending - total_investment,
                "savingsRate": _percentage(total_income - total_spending, total_income),
            },
            "spending": {
                "total": total_spending,
                "necessary": necessary,
                "unnecessary": unnecessary,
                "necessaryPercentage": _percentage(necessary, total_spending),
                "byCategory": dict(spending_by_category),
            },
            "investments": {
                "total": total_investment,
                "byType": dict(investment_by_type),
            },
            "byPaymentMethod": dict(by_payment_method),
        }

    async def weekly_summary(self, owner_id: str, start: Any = None) -> dict[str, Any]:
        """Summarise the seven days starting at ``start`` (default: the last week)."""
        if start:
            first_day = parse_date_bound(start, "startDate")
            if isinstance(first_day, datetime):
                first_day = first_day.date()
        else:
            first_day = datetime.now(timezone.utc).date() - timedelta(days=7)
        last_day: date = first_day + timedelta(days=6)

        logs = await self._owned_records(DAILY_LOG, owner_id, start=first_day, end=last_day)
        return {
            "startDate": first_day.isoformat(),
            "endDate": last_day.isoformat(),
            "totalDays": len(logs),
            "averageDayScore": _mean(logs, "day_score"),
            "averageMoodScore": _mean(logs, "mood_score"),
            "averageEnergyScore": _mean(logs, "energy_score"),
            "totalWorkHours": _total(logs, "work_hours"),
            "totalLearningHours": _total(logs, "learning_hours"),
            "totalWorkoutMinutes": _total(logs, "workout_minutes"),
            "totalMoneySpent": _total(logs, "money_spent"),
            "logs": logs,
        }
