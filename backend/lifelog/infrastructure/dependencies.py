"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator, Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from lifelog.config import get_settings
from lifelog.application.services import (
    ExportService,
    ResourceService,
    StatsService,
    UserService,
)
from lifelog.domain.entities import EntityDescriptor
from lifelog.domain.exceptions import AuthenticationError
from lifelog.infrastructure.database.session import get_db_session
from lifelog.infrastructure.database.repositories import (
    SQLAlchemyRecordStore,
    SQLAlchemyUserRepository,
)
from lifelog.infrastructure.security.jwt_auth import decode_access_token, user_id_from_claims

# auto_error=False so a missing header reaches the 401 envelope handler
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Resolves the caller identity from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")
    settings = get_settings()
    claims = decode_access_token(
        credentials.credentials, settings.jwt_secret, settings.jwt_algorithm
    )
    return user_id_from_claims(claims)


def resource_service(
    descriptor: EntityDescriptor,
) -> Callable[..., AsyncGenerator[ResourceService, None]]:
    """Builds a dependency that provides a ResourceService for ``descriptor``."""

    async def get_resource_service(
        session: AsyncSession = Depends(get_db_session),
    ) -> AsyncGenerator[ResourceService, None]:
        settings = get_settings()
        yield ResourceService(
            SQLAlchemyRecordStore(session),
            descriptor,
            default_limit=settings.default_page_size,
            max_limit=settings.max_page_size,
        )

    return get_resource_service


async def get_stats_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[StatsService, None]:
    """Provides a StatsService reading through the record store."""
    yield StatsService(SQLAlchemyRecordStore(session))


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService instance with its repository wired up."""
    yield UserService(SQLAlchemyUserRepository(session))


async def get_export_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ExportService, None]:
    """Provides an ExportService reading through the record store."""
    yield ExportService(SQLAlchemyRecordStore(session))
