"""Pydantic DTOs for wellness entries."""

import datetime as dt

from pydantic import BaseModel, Field


class WellnessFields(BaseModel):
    sleep_hours: float | None = Field(None, ge=0, le=24)
    sleep_quality: int | None = Field(None, ge=1, le=10)
    energy_level: int | None = Field(None, ge=1, le=10)
    mood_score: int | None = Field(None, ge=1, le=10)
    stress_level: int | None = Field(None, ge=1, le=10)
    mental_clarity: int | None = Field(None, ge=1, le=10)
    diet_discipline: int | None = Field(None, ge=1, le=10)
    hygiene_score: int | None = Field(None, ge=1, le=10)
    hydration_liters: float | None = Field(None, ge=0)
    screen_time_min: int | None = Field(None, ge=0)
    outdoor_time_min: int | None = Field(None, ge=0)
    morning_routine: bool | None = None
    evening_routine: bool | None = None
    physical_symptoms: str | None = None
    wellness_note: str | None = None


class WellnessEntryCreate(WellnessFields):
    """Schema for creating a wellness entry."""

    date: dt.date


class WellnessEntryUpdate(WellnessFields):
    """Schema for updating a wellness entry — all fields optional."""

    date: dt.date | None = None
