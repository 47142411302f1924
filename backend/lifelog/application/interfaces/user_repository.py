"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from lifelog.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        """Retrieve a single user by id."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user."""
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist profile changes of an existing user."""
        ...
