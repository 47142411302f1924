"""SQLAlchemy ORM model for the SkillSession entity."""

import datetime as dt

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifelog.infrastructure.database.base import Base, IdMixin, OwnedMixin, TimestampMixin
from lifelog.infrastructure.database.models.project import ProjectModel


class SkillSessionModel(IdMixin, OwnedMixin, TimestampMixin, Base):
    """ORM model — maps to the 'skill_sessions' table."""

    __tablename__ = "skill_sessions"

    project_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("projects.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    skill_category: Mapped[str] = mapped_column(String(100), nullable=False)
    sub_skill: Mapped[str | None] = mapped_column(String(255), nullable=True)
    time_spent_min: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mastery_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    quality_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    output_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    learned_points: Mapped[str | None] = mapped_column(Text, nullable=True)

    project: Mapped[ProjectModel | None] = relationship()
