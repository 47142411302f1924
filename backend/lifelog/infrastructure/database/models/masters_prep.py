"""SQLAlchemy ORM models for master's-degree preparation items and their work sessions."""

import datetime as dt

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin
from lifelog.infrastructure.database.models.project import GoalModel


class MastersPrepItemModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'masters_prep_items' table."""

    __tablename__ = "masters_prep_items"

    related_goal_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("goals.id", ondelete="SET NULL"),
        nullable=True,
    )
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    subcategory: Mapped[str | None] = mapped_column(String(100), nullable=True)
    task_title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="not_started")
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=2)  # 1 high … 3 low
    progress_percent: Mapped[float | None] = mapped_column(Float, nullable=True)
    readiness_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    time_spent_min: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    deadline: Mapped[dt.date | None] = mapped_column(Date, nullable=True)

    related_goal: Mapped[GoalModel | None] = relationship()
    sessions: Mapped[list["MastersPrepSessionModel"]] = relationship(
        back_populates="prep_item", cascade="all, delete-orphan", passive_deletes=True
    )


class MastersPrepSessionModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'masters_prep_sessions' table (child of an item)."""

    __tablename__ = "masters_prep_sessions"

    prep_item_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("masters_prep_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time_spent_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    prep_item: Mapped[MastersPrepItemModel] = relationship(back_populates="sessions")
