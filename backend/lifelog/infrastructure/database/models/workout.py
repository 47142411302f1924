"""SQLAlchemy ORM models for workout sessions and their sets."""

import datetime as dt

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class WorkoutSessionModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'workout_sessions' table."""

    __tablename__ = "workout_sessions"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    workout_type: Mapped[str] = mapped_column(String(32), nullable=False)
    routine_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    duration_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    intensity_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    calories: Mapped[int | None] = mapped_column(Integer, nullable=True)
    steps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    distance_km: Mapped[float | None] = mapped_column(Float, nullable=True)
    workout_quality: Mapped[int | None] = mapped_column(Integer, nullable=True)
    post_mood: Mapped[str | None] = mapped_column(String(100), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    sets: Mapped[list["WorkoutSetModel"]] = relationship(
        back_populates="session", cascade="all, delete-orphan", passive_deletes=True
    )


class WorkoutSetModel(IdMixin, TimestampMixin, Base):
    """ORM model — maps to the 'workout_sets' table (child of a session)."""

    __tablename__ = "workout_sets"

    workout_session_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("workout_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    duration_sec: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    session: Mapped[WorkoutSessionModel] = relationship(back_populates="sets")
