"""Pydantic DTOs for master's preparation items and sessions."""

import datetime as dt

from pydantic import BaseModel, Field


class MastersPrepItemCreate(BaseModel):
    """Schema for creating a preparation item."""

    category: str = Field(..., min_length=1, max_length=100, examples=["scholarship"])
    subcategory: str | None = Field(None, max_length=100)
    task_title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: str = Field("not_started", max_length=32)
    priority: int = Field(2, ge=1, le=3)
    progress_percent: float | None = Field(None, ge=0, le=100)
    readiness_score: int | None = Field(None, ge=1, le=10)
    deadline: dt.date | None = None
    related_goal_id: str | None = Field(None, max_length=36)


class MastersPrepItemUpdate(BaseModel):
    category: str | None = Field(None, min_length=1, max_length=100)
    subcategory: str | None = Field(None, max_length=100)
    task_title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = Field(None, max_length=32)
    priority: int | None = Field(None, ge=1, le=3)
    progress_percent: float | None = Field(None, ge=0, le=100)
    readiness_score: int | None = Field(None, ge=1, le=10)
    time_spent_min: int | None = Field(None, ge=0)
    deadline: dt.date | None = None
    related_goal_id: str | None = Field(None, max_length=36)


class MastersPrepSessionCreate(BaseModel):
    """Schema for logging work on a preparation item."""

    date: dt.date
    time_spent_min: int | None = Field(None, ge=0)
    notes: str | None = None
