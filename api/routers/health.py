"""
Health check endpoint.

Verifies the two things the API can't work without: the history database
and Redis (runtime defaults). The simulator itself has no external state.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
from redis.asyncio import Redis

from api.dependencies import get_db, get_redis

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    db: AsyncSession = Depends(get_db),
    redis: Redis = Depends(get_redis),
) -> dict:
    await db.execute(text("SELECT 1"))
    await redis.ping()
    return {"status": "healthy", "database": "ok", "redis": "ok"}
