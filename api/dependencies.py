"""
FastAPI dependency injection.

Endpoints declare what they need and FastAPI builds it per request:
- get_db: an async session, closed automatically when the request ends
- get_redis: the Redis client created during app startup
- get_scheduler_defaults: the runtime default algorithm + quantum, read from Redis

Tests swap get_db and get_redis for in-memory versions via dependency_overrides;
get_scheduler_defaults picks up the override through its own Depends().
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from redis.asyncio import Redis

from api.schemas.scheduler import SchedulerDefaults
from config.settings import settings
from models.base import AsyncSessionLocal

# Redis keys shared by every API process
REDIS_ALGORITHM_KEY = "cpusched:default_algorithm"
REDIS_QUANTUM_KEY = "cpusched:default_quantum"


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yields an async database session, auto-closes when the request ends."""
    async with AsyncSessionLocal() as session:
        yield session


async def get_redis(request: Request) -> Redis:
    """Returns the Redis client stored on the app during startup."""
    return request.app.state.redis


def _decode(value) -> str:
    return value.decode() if isinstance(value, bytes) else value


async def get_scheduler_defaults(
    redis: Redis = Depends(get_redis),
) -> SchedulerDefaults:
    """Current defaults; settings fill in whatever Redis doesn't have."""
    algorithm = await redis.get(REDIS_ALGORITHM_KEY)
    quantum = await redis.get(REDIS_QUANTUM_KEY)
    return SchedulerDefaults(
        algorithm=_decode(algorithm) if algorithm else settings.DEFAULT_ALGORITHM,
        time_quantum=int(_decode(quantum)) if quantum else settings.DEFAULT_TIME_QUANTUM,
    )
