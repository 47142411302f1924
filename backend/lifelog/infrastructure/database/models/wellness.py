"""SQLAlchemy ORM model for the WellnessEntry entity — one row per user per day."""

import datetime as dt

from sqlalchemy import Boolean, Date, Float, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class WellnessEntryModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'wellness_entries' table."""

    __tablename__ = "wellness_entries"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    sleep_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    sleep_quality: Mapped[int | None] = mapped_column(Integer, nullable=True)
    energy_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mood_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    stress_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mental_clarity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    diet_discipline: Mapped[int | None] = mapped_column(Integer, nullable=True)
    hygiene_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    hydration_liters: Mapped[float | None] = mapped_column(Float, nullable=True)
    screen_time_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    outdoor_time_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    morning_routine: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    evening_routine: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    physical_symptoms: Mapped[str | None] = mapped_column(Text, nullable=True)
    wellness_note: Mapped[str | None] = mapped_column(Text, nullable=True)
    wellness_score: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_wellness_entries_user_date"),
    )
