"""SQLAlchemy ORM models for books and their reading sessions."""

import datetime as dt

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class BookModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'books' table."""

    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    genre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    total_pages: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="to_read")
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    reading_sessions: Mapped[list["BookReadingSessionModel"]] = relationship(
        back_populates="book", cascade="all, delete-orphan", passive_deletes=True
    )


class BookReadingSessionModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'book_reading_sessions' table."""

    __tablename__ = "book_reading_sessions"

    book_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    pages_read: Mapped[int | None] = mapped_column(Integer, nullable=True)
    time_spent_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    chapter_label: Mapped[str | None] = mapped_column(String(255), nullable=True)
    purpose: Mapped[str | None] = mapped_column(String(50), nullable=True)
    focus_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    key_ideas: Mapped[str | None] = mapped_column(Text, nullable=True)

    book: Mapped[BookModel] = relationship(back_populates="reading_sessions")
