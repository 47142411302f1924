"""Pydantic DTOs for projects and goals."""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

Priority = Literal["low", "medium", "high"]


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: str = Field("not_started", max_length=32)
    priority: Priority = "medium"
    start_date: dt.date | None = None
    target_date: dt.date | None = None


class ProjectUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = Field(None, max_length=32)
    priority: Priority | None = None
    start_date: dt.date | None = None
    target_date: dt.date | None = None


class GoalCreate(BaseModel):
    """Schema for creating a goal."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: str = Field("personal", max_length=50, examples=["career"])
    status: str = Field("not_started", max_length=32, examples=["in_progress"])
    priority: Priority = "medium"
    progress: int = Field(0, ge=0, le=100)
    target_date: dt.date | None = None
    project_id: str | None = Field(None, max_length=36)


class GoalUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(None, max_length=50)
    status: str | None = Field(None, max_length=32)
    priority: Priority | None = None
    progress: int | None = Field(None, ge=0, le=100)
    target_date: dt.date | None = None
    project_id: str | None = Field(None, max_length=36)
