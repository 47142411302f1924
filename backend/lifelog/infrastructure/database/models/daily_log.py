"""SQLAlchemy ORM model for the DailyLog entity — one row per user per day."""

import datetime as dt

from sqlalchemy import Date, Float, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class DailyLogModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'daily_logs' table."""

    __tablename__ = "daily_logs"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    main_focus: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    day_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mood_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    energy_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sleep_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    work_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    learning_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    workout_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    money_spent: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_daily_logs_user_date"),
    )

    def __repr__(self) -> str:
        return f"<DailyLogModel(id={self.id}, date={self.date})>"
