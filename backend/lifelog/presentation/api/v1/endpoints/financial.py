"""Financial transaction endpoints, plus aggregate statistics."""

from fastapi import APIRouter, Depends

from lifelog.application.schemas import (
    ApiResponse,
    FinancialTransactionCreate,
    FinancialTransactionUpdate,
)
from lifelog.application.services import StatsService
from lifelog.application.services.descriptors import FINANCIAL_TRANSACTION
from lifelog.infrastructure.dependencies import get_current_user_id, get_stats_service
from lifelog.presentation.api.responses import success
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

router = APIRouter(prefix="/financial", tags=["Financial"])


@router.get("/stats", response_model=ApiResponse)
async def financial_stats(
    startDate: str | None = None,  # noqa: N803
    endDate: str | None = None,  # noqa: N803
    user_id: str = Depends(get_current_user_id),
    service: StatsService = Depends(get_stats_service),
) -> ApiResponse:
    """Income, spending and investment totals within the optional date range."""
    return success(await service.financial_stats(user_id, startDate, endDate))


register_resource_routes(
    router, FINANCIAL_TRANSACTION, FinancialTransactionCreate, FinancialTransactionUpdate
)
