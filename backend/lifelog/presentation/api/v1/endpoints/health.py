"""Liveness and database readiness for the lifelog API."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lifelog.config import get_settings
from lifelog.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


async def _database_reachable(session: AsyncSession) -> bool:
    try:
        await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Database ping failed: %s", exc)
        return False
    return True


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_db_session)) -> dict:
    """Reports "degraded" when the record database does not answer a ping."""
    settings = get_settings()
    database_ok = await _database_reachable(session)
    return {
        "status": "healthy" if database_ok else "degraded",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": "ok" if database_ok else "unavailable",
    }
