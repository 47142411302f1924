"""Pydantic DTOs for skill practice sessions."""

import datetime as dt

from pydantic import BaseModel, Field


class SkillSessionCreate(BaseModel):
    """Schema for logging a skill session."""

    date: dt.date
    skill_category: str = Field(..., min_length=1, max_length=100, examples=["programming"])
    sub_skill: str | None = Field(None, max_length=255)
    project_id: str | None = Field(None, max_length=36)
    time_spent_min: int | None = Field(None, ge=0)
    mastery_level: int | None = Field(None, ge=1, le=10)
    quality_score: int | None = Field(None, ge=1, le=10)
    output_summary: str | None = None
    learned_points: str | None = None


class SkillSessionUpdate(BaseModel):
    date: dt.date | None = None
    skill_category: str | None = Field(None, min_length=1, max_length=100)
    sub_skill: str | None = Field(None, max_length=255)
    project_id: str | None = Field(None, max_length=36)
    time_spent_min: int | None = Field(None, ge=0)
    mastery_level: int | None = Field(None, ge=1, le=10)
    quality_score: int | None = Field(None, ge=1, le=10)
    output_summary: str | None = None
    learned_points: str | None = None
