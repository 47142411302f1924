"""Tests for the health check endpoint."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from lifelog.infrastructure.database.session import get_db_session
from lifelog.main import app


class _UnreachableSession:
    async def execute(self, statement):
        raise OperationalError(str(statement), {}, ConnectionRefusedError("refused"))


@pytest.mark.asyncio
async def test_health_check_reports_database_ok(client):
    response = await client.get("/api/v1/health")

    data = response.json()
    assert response.status_code == 200
    assert data["status"] == "healthy"
    assert data["database"] == "ok"
    assert data["service"] == "Lifelog API"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_health_check_is_degraded_without_database():
    async def _unreachable() -> AsyncGenerator[_UnreachableSession, None]:
        yield _UnreachableSession()

    app.dependency_overrides[get_db_session] = _unreachable
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health")
    finally:
        app.dependency_overrides.pop(get_db_session, None)

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
    assert response.json()["database"] == "unavailable"
