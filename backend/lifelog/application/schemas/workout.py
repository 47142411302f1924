"""Pydantic DTOs for workout sessions and sets."""

import datetime as dt

from pydantic import BaseModel, Field


class WorkoutSessionCreate(BaseModel):
    """Schema for logging a workout session."""

    date: dt.date
    workout_type: str = Field(..., min_length=1, max_length=32, examples=["gym"])
    routine_name: str | None = Field(None, max_length=255)
    duration_min: int | None = Field(None, ge=0)
    intensity_level: int | None = Field(None, ge=1, le=10)
    calories: int | None = Field(None, ge=0)
    steps: int | None = Field(None, ge=0)
    distance_km: float | None = Field(None, ge=0)
    workout_quality: int | None = Field(None, ge=1, le=10)
    post_mood: str | None = Field(None, max_length=100)
    notes: str | None = None


class WorkoutSessionUpdate(BaseModel):
    date: dt.date | None = None
    workout_type: str | None = Field(None, min_length=1, max_length=32)
    routine_name: str | None = Field(None, max_length=255)
    duration_min: int | None = Field(None, ge=0)
    intensity_level: int | None = Field(None, ge=1, le=10)
    calories: int | None = Field(None, ge=0)
    steps: int | None = Field(None, ge=0)
    distance_km: float | None = Field(None, ge=0)
    workout_quality: int | None = Field(None, ge=1, le=10)
    post_mood: str | None = Field(None, max_length=100)
    notes: str | None = None


class WorkoutSetCreate(BaseModel):
    """Schema for adding a set to a workout session."""

    exercise_name: str = Field(..., min_length=1, max_length=255, examples=["Squat"])
    set_number: int = Field(1, ge=1)
    reps: int | None = Field(None, ge=0)
    weight_kg: float | None = Field(None, ge=0)
    duration_sec: int | None = Field(None, ge=0)
    notes: str | None = None
