"""Pydantic DTOs for the user profile."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserProfileUpdate(BaseModel):
    """Schema for updating the caller's profile — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    timezone: str | None = Field(None, min_length=1, max_length=64, examples=["Asia/Jakarta"])


class UserResponse(BaseModel):
    """Profile returned to the client; never includes the credential hash."""

    id: str
    email: str
    name: str
    timezone: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
