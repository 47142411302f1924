"""Pydantic DTOs for daily logs."""

import datetime as dt

from pydantic import BaseModel, Field


class DailyLogFields(BaseModel):
    main_focus: str | None = Field(None, max_length=500)
    notes: str | None = None
    day_score: int | None = Field(None, ge=1, le=10)
    mood_score: int | None = Field(None, ge=1, le=10)
    energy_score: int | None = Field(None, ge=1, le=10)
    sleep_hours: float | None = Field(None, ge=0, le=24)
    work_hours: float | None = Field(None, ge=0, le=24)
    learning_hours: float | None = Field(None, ge=0, le=24)
    workout_minutes: int | None = Field(None, ge=0)
    money_spent: float | None = Field(None, ge=0)


class DailyLogCreate(DailyLogFields):
    """Schema for creating a daily log."""

    date: dt.date


class DailyLogUpdate(DailyLogFields):
    """Schema for updating a daily log — all fields optional."""

    date: dt.date | None = None
