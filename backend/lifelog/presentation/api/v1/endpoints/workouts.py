"""Workout endpoints — sessions with their sets, plus aggregate statistics."""

from fastapi import APIRouter, Depends

from lifelog.application.schemas import (
    ApiResponse,
    WorkoutSessionCreate,
    WorkoutSessionUpdate,
    WorkoutSetCreate,
)
from lifelog.application.services import StatsService
from lifelog.application.services.descriptors import WORKOUT_SESSION
from lifelog.infrastructure.dependencies import get_current_user_id, get_stats_service
from lifelog.presentation.api.responses import success
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

router = APIRouter(prefix="/workouts", tags=["Workouts"])


@router.get("/stats", response_model=ApiResponse)
async def workout_stats(
    startDate: str | None = None,  # noqa: N803
    endDate: str | None = None,  # noqa: N803
    user_id: str = Depends(get_current_user_id),
    service: StatsService = Depends(get_stats_service),
) -> ApiResponse:
    """Session totals and per-type breakdown within the optional date range."""
    return success(await service.workout_stats(user_id, startDate, endDate))


register_resource_routes(
    router,
    WORKOUT_SESSION,
    WorkoutSessionCreate,
    WorkoutSessionUpdate,
    child_schemas={"sets": WorkoutSetCreate},
)
