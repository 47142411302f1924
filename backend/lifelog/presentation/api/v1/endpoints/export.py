"""Export endpoints — download everything the caller owns."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from lifelog.application.schemas import ApiResponse
from lifelog.application.services import ExportService
from lifelog.infrastructure.dependencies import get_current_user_id, get_export_service
from lifelog.presentation.api.responses import success

router = APIRouter(prefix="/export", tags=["Export"])


@router.get("/summary", response_model=ApiResponse)
async def export_summary(
    user_id: str = Depends(get_current_user_id),
    service: ExportService = Depends(get_export_service),
) -> ApiResponse:
    """Row counts per table and overall."""
    return success(await service.summary(user_id))


@router.get("", response_model=ApiResponse)
@router.get("/json", response_model=ApiResponse)
async def export_json(
    table: str | None = Query(default=None),
    user_id: str = Depends(get_current_user_id),
    service: ExportService = Depends(get_export_service),
) -> ApiResponse:
    """All tables, or just ``table`` when given."""
    return success(await service.export_json(user_id, table))


@router.get("/csv", response_class=PlainTextResponse)
async def export_csv(
    table: str = Query(...),
    user_id: str = Depends(get_current_user_id),
    service: ExportService = Depends(get_export_service),
) -> PlainTextResponse:
    """One table as CSV, served as an attachment."""
    body = await service.export_csv(user_id, table)
    return PlainTextResponse(
        body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{table}.csv"'},
    )
