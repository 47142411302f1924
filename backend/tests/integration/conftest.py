"""Fixtures for tests against a real SQLite database and the ASGI app."""

from collections.abc import AsyncGenerator

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from lifelog.config import get_settings
from lifelog.infrastructure.database import Base
from lifelog.infrastructure.database.models import UserModel
from lifelog.infrastructure.database.session import enable_sqlite_foreign_keys, get_db_session
from lifelog.main import app

ALICE = "00000000-0000-0000-0000-00000000a11c"
BOB = "00000000-0000-0000-0000-000000000b0b"


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'lifelog.db'}",
        connect_args={"timeout": 10},
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with engine.begin() as conn:
        await conn.execute(
            UserModel.__table__.insert(),
            [
                {"id": ALICE, "email": "alice@example.com", "name": "Alice", "password_hash": ""},
                {"id": BOB, "email": "bob@example.com", "name": "Bob", "password_hash": ""},
            ],
        )
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


def make_token(user_id: str, **claims) -> str:
    settings = get_settings()
    return jwt.encode({"sub": user_id, **claims}, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def auth(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def _test_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _test_db_session
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_db_session, None)


@pytest.fixture
def alice() -> str:
    return ALICE


@pytest.fixture
def bob() -> str:
    return BOB


@pytest.fixture
def alice_headers() -> dict[str, str]:
    return auth(ALICE)


@pytest.fixture
def bob_headers() -> dict[str, str]:
    return auth(BOB)


@pytest.fixture
def auth_for():
    """Build bearer headers for an arbitrary user id."""
    return auth
