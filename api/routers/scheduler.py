"""
Scheduler defaults endpoints.

GET /scheduler/defaults → algorithm + quantum used when a request omits them
PUT /scheduler/defaults → change them at runtime

The defaults live in Redis, so a change made through one API process is seen
by every other one on its next request. No restart required.
"""

import logging

from fastapi import APIRouter, Depends
from redis.asyncio import Redis

from api.dependencies import (
    REDIS_ALGORITHM_KEY,
    REDIS_QUANTUM_KEY,
    get_redis,
    get_scheduler_defaults,
)
from api.schemas.scheduler import SchedulerDefaults

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


@router.get("/defaults", response_model=SchedulerDefaults)
async def read_defaults(
    defaults: SchedulerDefaults = Depends(get_scheduler_defaults),
) -> SchedulerDefaults:
    return defaults


@router.put("/defaults", response_model=SchedulerDefaults)
async def update_defaults(
    new_defaults: SchedulerDefaults,
    redis: Redis = Depends(get_redis),
) -> SchedulerDefaults:
    """Validation (known algorithm, quantum > 0) happens in the schema."""
    await redis.set(REDIS_ALGORITHM_KEY, new_defaults.algorithm.value)
    await redis.set(REDIS_QUANTUM_KEY, new_defaults.time_quantum)
    logger.info(
        f"Defaults changed: algorithm={new_defaults.algorithm.value}, "
        f"quantum={new_defaults.time_quantum}"
    )
    return new_defaults
