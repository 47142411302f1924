"""SQLAlchemy ORM models for career activities and job applications."""

import datetime as dt

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin
from lifelog.infrastructure.database.models.project import ProjectModel


class CareerActivityModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'career_activities' table."""

    __tablename__ = "career_activities"

    project_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    activity_type: Mapped[str] = mapped_column(String(50), nullable=False)
    target_entity: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    output_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    time_spent_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    career_impact: Mapped[int | None] = mapped_column(Integer, nullable=True)

    project: Mapped[ProjectModel | None] = relationship()


class JobApplicationModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'job_applications' table."""

    __tablename__ = "job_applications"

    company: Mapped[str] = mapped_column(String(255), nullable=False)
    role_title: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="applied")
    applied_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True, index=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
