"""Pydantic DTOs for journal entries (papers, articles, reports read)."""

import datetime as dt

from pydantic import BaseModel, Field


class JournalEntryCreate(BaseModel):
    """Schema for creating a journal entry."""

    date: dt.date
    title: str = Field(..., min_length=1, max_length=500)
    authors: str | None = None
    content_type: str | None = Field(None, max_length=50, examples=["paper"])
    category: str | None = Field(None, max_length=100)
    url: str | None = Field(None, max_length=1000)
    summary: str | None = None
    key_insights: str | None = None
    time_spent_min: int | None = Field(None, ge=0)
    rating_usefulness: int | None = Field(None, ge=1, le=10)


class JournalEntryUpdate(BaseModel):
    """Schema for updating a journal entry — all fields optional."""

    date: dt.date | None = None
    title: str | None = Field(None, min_length=1, max_length=500)
    authors: str | None = None
    content_type: str | None = Field(None, max_length=50)
    category: str | None = Field(None, max_length=100)
    url: str | None = Field(None, max_length=1000)
    summary: str | None = None
    key_insights: str | None = None
    time_spent_min: int | None = Field(None, ge=0)
    rating_usefulness: int | None = Field(None, ge=1, le=10)
