"""Pydantic DTOs for the uniform response envelope."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PageMeta(BaseModel):
    """Pagination metadata attached to list responses."""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")


class ApiResponse(BaseModel):
    """Envelope wrapping every response body.

    Success responses carry ``data`` (and optionally ``message``/``meta``);
    error responses carry ``error`` only.
    """

    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None
    meta: PageMeta | None = None
