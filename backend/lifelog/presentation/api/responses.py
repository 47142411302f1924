"""Response envelope helpers shared by every endpoint."""

from typing import Any

from lifelog.application.schemas import ApiResponse, PageMeta
from lifelog.domain.entities import RecordPage


def success(data: Any = None, message: str | None = None) -> ApiResponse:
    return ApiResponse(success=True, data=data, message=message)


def paginated(page: RecordPage) -> ApiResponse:
    """Wrap one page of records with its pagination metadata."""
    return ApiResponse(
        success=True,
        data=page.items,
        meta=PageMeta(
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        ),
    )


def failure(error: str) -> dict[str, Any]:
    """Error body — carries the message only, never data."""
    return {"success": False, "error": error}
