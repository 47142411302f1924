"""SQLAlchemy ORM model for the User entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from lifelog.infrastructure.database.base import Base, IdMixin, TimestampMixin


class UserModel(IdMixin, TimestampMixin, Base):
    """ORM model — maps to the 'users' table."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, default="Asia/Jakarta")

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email='{self.email}')>"
