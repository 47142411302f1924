"""Domain entity — pure Python business object for an application user."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class User:
    """Owner of every domain record. Never hard-deleted."""

    email: str
    name: str
    password_hash: str = ""
    timezone: str = "Asia/Jakarta"
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update_profile(self, name: str | None = None, timezone_name: str | None = None) -> None:
        """Update mutable profile fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if timezone_name is not None:
            self.timezone = timezone_name
        self.updated_at = datetime.now(timezone.utc)
