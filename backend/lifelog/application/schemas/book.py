"""Pydantic DTOs for books and reading sessions."""

import datetime as dt

from pydantic import BaseModel, Field


class BookCreate(BaseModel):
    """Schema for adding a book."""

    title: str = Field(..., min_length=1, max_length=500)
    author: str | None = Field(None, max_length=255)
    genre: str | None = Field(None, max_length=100)
    total_pages: int | None = Field(None, ge=1)
    status: str = Field("to_read", max_length=32, examples=["reading"])
    rating: int | None = Field(None, ge=1, le=10)
    notes: str | None = None


class BookUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=500)
    author: str | None = Field(None, max_length=255)
    genre: str | None = Field(None, max_length=100)
    total_pages: int | None = Field(None, ge=1)
    status: str | None = Field(None, max_length=32)
    rating: int | None = Field(None, ge=1, le=10)
    notes: str | None = None


class BookReadingSessionCreate(BaseModel):
    """Schema for logging a reading session against a book."""

    book_id: str = Field(..., min_length=1, max_length=36)
    date: dt.date
    pages_read: int | None = Field(None, ge=0)
    time_spent_min: int | None = Field(None, ge=0)
    chapter_label: str | None = Field(None, max_length=255)
    purpose: str | None = Field(None, max_length=50)
    focus_score: int | None = Field(None, ge=1, le=10)
    summary: str | None = None
    key_ideas: str | None = None


class BookReadingSessionUpdate(BaseModel):
    date: dt.date | None = None
    pages_read: int | None = Field(None, ge=0)
    time_spent_min: int | None = Field(None, ge=0)
    chapter_label: str | None = Field(None, max_length=255)
    purpose: str | None = Field(None, max_length=50)
    focus_score: int | None = Field(None, ge=1, le=10)
    summary: str | None = None
    key_ideas: str | None = None
