"""Pydantic DTOs for financial transactions."""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

Direction = Literal["spend", "income", "invest"]


class FinancialTransactionCreate(BaseModel):
    """Schema for recording a transaction."""

    date: dt.date
    direction: Direction
    amount_idr: float = Field(..., ge=0)
    category: str = Field(..., min_length=1, max_length=100, examples=["food"])
    description: str | None = Field(None, max_length=500)
    notes: str | None = None
    is_necessary: bool | None = None
    payment_method: str | None = Field(None, max_length=50)
    investment_type: str | None = Field(None, max_length=50)


class FinancialTransactionUpdate(BaseModel):
    date: dt.date | None = None
    direction: Direction | None = None
    amount_idr: float | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    notes: str | None = None
    is_necessary: bool | None = None
    payment_method: str | None = Field(None, max_length=50)
    investment_type: str | None = Field(None, max_length=50)
