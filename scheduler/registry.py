"""
Scheduler factory: maps algorithm tags to scheduler classes.

ONE place knows how to turn "FCFS" / "sjf" / Algorithm.RR into a ready
scheduler. Adding an algorithm means: create the class, add one line here.
"""

import logging
from typing import Optional, Union

from models.enums import Algorithm
from scheduler.base import AbstractScheduler
from scheduler.exceptions import ConfigurationError
from scheduler.fcfs import FCFSScheduler
from scheduler.sjf import SJFScheduler
from scheduler.round_robin import RoundRobinScheduler

logger = logging.getLogger(__name__)


_REGISTRY: dict[Algorithm, type[AbstractScheduler]] = {
    Algorithm.FCFS: FCFSScheduler,
    Algorithm.SJF: SJFScheduler,
    Algorithm.RR: RoundRobinScheduler,
}


def resolve_algorithm(tag: Union[Algorithm, str, None]) -> Algorithm:
    """Turn a tag (FCFS/SJF/RR, any case) into an Algorithm, or raise ConfigurationError."""
    if tag is None:
        raise ConfigurationError("No scheduling algorithm given")
    try:
        return Algorithm(tag)
    except ValueError:
        raise ConfigurationError(
            f"Unknown scheduling algorithm: {tag!r}. "
            f"Available: {[a.value for a in Algorithm]}"
        ) from None


def create_scheduler(
    algorithm: Union[Algorithm, str], time_quantum: Optional[int] = None
) -> AbstractScheduler:
    """
    Create a scheduler instance for the given algorithm.

    Round Robin needs a positive quantum:
        create_scheduler(Algorithm.RR, time_quantum=2)

    FCFS and SJF take no arguments; a quantum passed for them is ignored.
    """
    algorithm = resolve_algorithm(algorithm)
    cls = _REGISTRY[algorithm]

    if algorithm == Algorithm.RR:
        return cls(time_quantum=time_quantum)
    if time_quantum is not None:
        logger.debug(f"Ignoring time quantum {time_quantum} for {algorithm.value}")
    return cls()
