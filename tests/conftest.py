"""
Shared test fixtures.

These replace real infrastructure with lightweight in-memory alternatives:
- PostgreSQL → SQLite in memory (via aiosqlite)
- Redis → fakeredis (pure Python Redis mock)
- HTTP server → httpx.AsyncClient with ASGI transport (no network)

The simulator core needs none of this; only the API tests use these fixtures.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from fakeredis.aioredis import FakeRedis

from models.base import Base
from api.main import create_app
from api.dependencies import get_db, get_redis

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def two_jobs():
    """The P0=5, P1=3 workload used throughout the scheduler tests."""
    return [("P0", 5), ("P1", 3)]


@pytest_asyncio.fixture
async def async_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(TEST_DB_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(async_engine):
    factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def fake_redis():
    r = FakeRedis()
    yield r
    await r.flushall()


@pytest_asyncio.fixture
async def client(async_session, fake_redis):
    """
    Test HTTP client talking directly to the FastAPI app.

    dependency_overrides swaps the real database session and Redis client
    for the in-memory ones above. ASGITransport skips the lifespan, so
    runtime defaults start empty and fall back to settings.
    """
    app = create_app()

    async def override_get_db():
        yield async_session

    async def override_get_redis():
        return fake_redis

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = override_get_redis

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
