"""SQLAlchemy ORM model for the FinancialTransaction entity."""

import datetime as dt

from sqlalchemy import Boolean, Date, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class FinancialTransactionModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'financial_transactions' table."""

    __tablename__ = "financial_transactions"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    direction: Mapped[str] = mapped_column(String(16), nullable=False)  # spend | income | invest
    amount_idr: Mapped[float] = mapped_column(Float, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_necessary: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    payment_method: Mapped[str | None] = mapped_column(String(50), nullable=True)
    investment_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
