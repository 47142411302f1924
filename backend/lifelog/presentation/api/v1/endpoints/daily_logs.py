"""Daily log endpoints — one log per user per day, plus the weekly summary."""

from fastapi import APIRouter, Depends

from lifelog.application.schemas import ApiResponse, DailyLogCreate, DailyLogUpdate
from lifelog.application.services import StatsService
from lifelog.application.services.descriptors import DAILY_LOG
from lifelog.infrastructure.dependencies import get_current_user_id, get_stats_service
from lifelog.presentation.api.responses import success
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

router = APIRouter(prefix="/daily-logs", tags=["Daily Logs"])


@router.get("/weekly-summary", response_model=ApiResponse)
async def weekly_summary(
    startDate: str | None = None,  # noqa: N803
    user_id: str = Depends(get_current_user_id),
    service: StatsService = Depends(get_stats_service),
) -> ApiResponse:
    """Averages and totals over the seven days starting at ``startDate``."""
    return success(await service.weekly_summary(user_id, startDate))


register_resource_routes(router, DAILY_LOG, DailyLogCreate, DailyLogUpdate)
