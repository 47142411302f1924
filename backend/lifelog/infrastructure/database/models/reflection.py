"""SQLAlchemy ORM model for the ReflectionEntry entity — one row per user per day."""

import datetime as dt

from sqlalchemy import Date, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class ReflectionEntryModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'reflection_entries' table."""

    __tablename__ = "reflection_entries"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    went_well: Mapped[str | None] = mapped_column(Text, nullable=True)
    went_wrong: Mapped[str | None] = mapped_column(Text, nullable=True)
    learned_today: Mapped[str | None] = mapped_column(Text, nullable=True)
    gratitude: Mapped[str | None] = mapped_column(Text, nullable=True)
    integrity_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    discipline_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    emotional_state: Mapped[str | None] = mapped_column(String(50), nullable=True)

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_reflection_entries_user_date"),
    )
