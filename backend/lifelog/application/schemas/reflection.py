"""Pydantic DTOs for daily reflections."""

import datetime as dt

from pydantic import BaseModel, Field


class ReflectionFields(BaseModel):
    went_well: str | None = None
    went_wrong: str | None = None
    learned_today: str | None = None
    gratitude: str | None = None
    integrity_score: int | None = Field(None, ge=1, le=10)
    discipline_score: int | None = Field(None, ge=1, le=10)
    emotional_state: str | None = Field(None, max_length=50)


class ReflectionEntryCreate(ReflectionFields):
    """Schema for creating a reflection."""

    date: dt.date


class ReflectionEntryUpdate(ReflectionFields):
    date: dt.date | None = None
