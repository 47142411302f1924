"""SQLAlchemy ORM model for the JournalEntry entity (papers and articles read)."""

import datetime as dt

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class JournalEntryModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'journal_entries' table."""

    __tablename__ = "journal_entries"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    authors: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    key_insights: Mapped[str | None] = mapped_column(Text, nullable=True)
    time_spent_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rating_usefulness: Mapped[int | None] = mapped_column(Integer, nullable=True)
