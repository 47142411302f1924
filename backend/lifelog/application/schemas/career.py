"""Pydantic DTOs for career activities and job applications."""

import datetime as dt

from pydantic import BaseModel, Field


class CareerActivityCreate(BaseModel):
    """Schema for logging a career activity."""

    date: dt.date
    activity_type: str = Field(..., min_length=1, max_length=50, examples=["networking"])
    project_id: str | None = Field(None, max_length=36)
    target_entity: str | None = Field(None, max_length=255)
    description: str | None = None
    output_summary: str | None = None
    time_spent_min: int | None = Field(None, ge=0)
    career_impact: int | None = Field(None, ge=1, le=10)


class CareerActivityUpdate(BaseModel):
    date: dt.date | None = None
    activity_type: str | None = Field(None, min_length=1, max_length=50)
    project_id: str | None = Field(None, max_length=36)
    target_entity: str | None = Field(None, max_length=255)
    description: str | None = None
    output_summary: str | None = None
    time_spent_min: int | None = Field(None, ge=0)
    career_impact: int | None = Field(None, ge=1, le=10)


class JobApplicationCreate(BaseModel):
    """Schema for tracking a job application."""

    company: str = Field(..., min_length=1, max_length=255)
    role_title: str = Field(..., min_length=1, max_length=255)
    status: str = Field("applied", max_length=32, examples=["interview"])
    applied_date: dt.date | None = None
    location: str | None = Field(None, max_length=255)
    job_url: str | None = Field(None, max_length=1000)
    notes: str | None = None


class JobApplicationUpdate(BaseModel):
    company: str | None = Field(None, min_length=1, max_length=255)
    role_title: str | None = Field(None, min_length=1, max_length=255)
    status: str | None = Field(None, max_length=32)
    applied_date: dt.date | None = None
    location: str | None = Field(None, max_length=255)
    job_url: str | None = Field(None, max_length=1000)
    notes: str | None = None
