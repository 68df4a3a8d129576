"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (create the history table, connect to Redis, seed defaults)
3. Registers all routers (simulations, scheduler defaults, health)
4. Runs shutdown logic (close connections)

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from redis.asyncio import Redis as AsyncRedis

from config.settings import settings
from models.base import async_engine, Base
from api.dependencies import REDIS_ALGORITHM_KEY, REDIS_QUANTUM_KEY
from api.routers import simulations, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup (before yield):
    - Creates the simulation_runs table if it doesn't exist
    - Connects to Redis
    - Seeds the runtime defaults from settings, keeping any value already set

    Shutdown (after yield):
    - Closes Redis and disposes the DB connection pool
    """
    # ── Startup ─────────────────────────────────────────────────
    logger.info("Creating database tables...")
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    app.state.redis = AsyncRedis.from_url(settings.redis_url)
    await app.state.redis.set(REDIS_ALGORITHM_KEY, settings.DEFAULT_ALGORITHM.value, nx=True)
    await app.state.redis.set(REDIS_QUANTUM_KEY, settings.DEFAULT_TIME_QUANTUM, nx=True)
    logger.info(
        f"API ready, default algorithm: {settings.DEFAULT_ALGORITHM.value}, "
        f"quantum: {settings.DEFAULT_TIME_QUANTUM}"
    )

    yield

    # ── Shutdown ────────────────────────────────────────────────
    await app.state.redis.close()
    await async_engine.dispose()
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="CPU Scheduling Simulator",
        description="Wait and turnaround times under FCFS, SJF and Round Robin",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(simulations.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
