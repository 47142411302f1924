"""SQLAlchemy ORM models for IELTS practice: sessions, their mistakes, and vocabulary."""

import datetime as dt

from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class IeltsSessionModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'ielts_sessions' table."""

    __tablename__ = "ielts_sessions"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    skill_type: Mapped[str] = mapped_column(String(32), nullable=False)
    sub_skill: Mapped[str | None] = mapped_column(String(255), nullable=True)
    material_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    time_spent_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    estimated_band: Mapped[float | None] = mapped_column(Float, nullable=True)
    confidence_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    new_vocab_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    mistakes: Mapped[list["IeltsMistakeModel"]] = relationship(
        back_populates="session", cascade="all, delete-orphan", passive_deletes=True
    )
    vocab: Mapped[list["IeltsVocabModel"]] = relationship(back_populates="session")


class IeltsMistakeModel(IdMixin, TimestampMixin, Base):
    """ORM model — maps to the 'ielts_mistakes' table (child of a session)."""

    __tablename__ = "ielts_mistakes"

    ielts_session_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("ielts_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    correction: Mapped[str | None] = mapped_column(Text, nullable=True)

    session: Mapped[IeltsSessionModel] = relationship(back_populates="mistakes")


class IeltsVocabModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'ielts_vocab' table."""

    __tablename__ = "ielts_vocab"

    ielts_session_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("ielts_sessions.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    phrase: Mapped[str] = mapped_column(String(255), nullable=False)
    meaning: Mapped[str | None] = mapped_column(Text, nullable=True)
    example: Mapped[str | None] = mapped_column(Text, nullable=True)
    mastered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    session: Mapped[IeltsSessionModel | None] = relationship(back_populates="vocab")
