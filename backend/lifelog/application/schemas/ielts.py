"""Pydantic DTOs for IELTS sessions, mistakes and vocabulary."""

import datetime as dt

from pydantic import BaseModel, Field


class IeltsSessionCreate(BaseModel):
    """Schema for creating an IELTS practice session."""

    date: dt.date
    skill_type: str = Field(..., min_length=1, max_length=32, examples=["reading"])
    sub_skill: str | None = Field(None, max_length=255)
    material_name: str | None = Field(None, max_length=255)
    time_spent_min: int | None = Field(None, ge=0)
    estimated_band: float | None = Field(None, ge=0, le=9)
    confidence_score: int | None = Field(None, ge=1, le=10)
    new_vocab_count: int | None = Field(None, ge=0)
    notes: str | None = None


class IeltsSessionUpdate(BaseModel):
    """Schema for updating an IELTS session — all fields optional."""

    date: dt.date | None = None
    skill_type: str | None = Field(None, min_length=1, max_length=32)
    sub_skill: str | None = Field(None, max_length=255)
    material_name: str | None = Field(None, max_length=255)
    time_spent_min: int | None = Field(None, ge=0)
    estimated_band: float | None = Field(None, ge=0, le=9)
    confidence_score: int | None = Field(None, ge=1, le=10)
    new_vocab_count: int | None = Field(None, ge=0)
    notes: str | None = None


class IeltsMistakeCreate(BaseModel):
    """Schema for adding a mistake to a session."""

    category: str = Field(..., min_length=1, max_length=100, examples=["grammar"])
    description: str = Field(..., min_length=1)
    correction: str | None = None


class IeltsVocabCreate(BaseModel):
    """Schema for saving a vocabulary item."""

    phrase: str = Field(..., min_length=1, max_length=255)
    meaning: str | None = None
    example: str | None = None
    mastered: bool = False
    ielts_session_id: str | None = Field(None, max_length=36)


class IeltsVocabUpdate(BaseModel):
    phrase: str | None = Field(None, min_length=1, max_length=255)
    meaning: str | None = None
    example: str | None = None
    mastered: bool | None = None
    ielts_session_id: str | None = Field(None, max_length=36)
