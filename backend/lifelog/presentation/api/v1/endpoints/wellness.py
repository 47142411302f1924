"""Wellness endpoints — one entry per user per day with a derived overall score."""

from typing import Any

from fastapi import APIRouter

from lifelog.application.schemas import WellnessEntryCreate, WellnessEntryUpdate
from lifelog.application.services import compute_wellness_score
from lifelog.application.services.descriptors import WELLNESS_ENTRY
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

router = APIRouter(prefix="/wellness", tags=["Wellness"])


def _with_wellness_score(payload: dict[str, Any]) -> dict[str, Any]:
    return {**payload, "wellness_score": compute_wellness_score(payload)}


register_resource_routes(
    router,
    WELLNESS_ENTRY,
    WellnessEntryCreate,
    WellnessEntryUpdate,
    prepare_upsert=_with_wellness_score,
)
