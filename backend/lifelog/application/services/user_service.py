"""Application service (use case) for the authenticated user's profile."""

from lifelog.application.interfaces import UserRepository
from lifelog.application.schemas import UserProfileUpdate
from lifelog.domain.entities import User
from lifelog.domain.exceptions import EntityNotFoundError


class UserService:
    """Reads and updates the caller's own profile. Depends on the repository port (DI)."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_profile(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def update_profile(self, user_id: str, data: UserProfileUpdate) -> User:
        user = await self.get_profile(user_id)
        user.update_profile(name=data.name, timezone_name=data.timezone)
        return await self._repository.update(user)
