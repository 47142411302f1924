"""SQLAlchemy ORM models for projects and goals."""

import datetime as dt

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin


class ProjectModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'projects' table."""

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="not_started")
    priority: Mapped[str] = mapped_column(String(16), nullable=False, default="medium")
    start_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    target_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)

    goals: Mapped[list["GoalModel"]] = relationship(back_populates="project")


class GoalModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'goals' table."""

    __tablename__ = "goals"

    project_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False, default="personal")
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="not_started")
    priority: Mapped[str] = mapped_column(String(16), nullable=False, default="medium")
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    target_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)

    project: Mapped[ProjectModel | None] = relationship(back_populates="goals")
