"""
Scheduler Engine: the single entry point of the simulator.

Every run goes through the same three steps:

    1. Validate the configuration: algorithm tag and (for RR) the quantum.
       → Building the scheduler from the registry does this.
    2. Build a fresh Job Table from the caller's jobs.
       → Range checks (burst > 0, unique names) and the optional size bound.
    3. Run the algorithm over the table and aggregate the Report.

       caller jobs           Job Table               Report
    ┌──────────────┐    ┌────────────────┐    ┌──────────────────┐
    │ (name, burst)│───>│ FCFS / SJF /   │───>│ per-job results  │
    │ pairs        │copy│ RR mutate it   │agg │ + averages       │
    └──────────────┘    └────────────────┘    └──────────────────┘

Any error is raised before the algorithm starts, so either a full report is
produced or none is. The table is owned by one run and dropped afterwards;
nothing is carried between runs.
"""

import logging
from typing import Iterable, Optional, Union

from config.settings import settings
from models.enums import Algorithm
from scheduler.base import Job
from scheduler.exceptions import ConfigurationError, InputError
from scheduler.registry import create_scheduler, resolve_algorithm
from scheduler.report import Report, build_report

logger = logging.getLogger(__name__)

JobSpec = Union[Job, tuple[str, int]]


class SchedulerEngine:
    """
    Validates, dispatches and aggregates.

    max_jobs bounds the Job Table size; None (the default from settings)
    means unbounded.
    """

    def __init__(self, max_jobs: Optional[int] = None):
        self._max_jobs = max_jobs if max_jobs is not None else settings.MAX_JOBS

    def run(
        self,
        algorithm: Union[Algorithm, str],
        jobs: Iterable[JobSpec],
        time_quantum: Optional[int] = None,
        collect_trace: bool = False,
    ) -> Report:
        """
        Run one algorithm over a fresh copy of `jobs`.

        The per-step trace is only built when collect_trace is True;
        otherwise the report carries an empty trace.
        """
        try:
            algorithm = resolve_algorithm(algorithm)
            scheduler = create_scheduler(algorithm, time_quantum)
            table = self._build_table(jobs)
        except (ConfigurationError, InputError) as e:
            logger.warning(f"Simulation rejected: {e}")
            raise

        quantum = time_quantum if algorithm == Algorithm.RR else None
        logger.info(
            f"Running {scheduler.policy_name} over {len(table)} jobs"
            + (f" (quantum={quantum})" if quantum is not None else "")
        )

        trace = scheduler.run(table, collect_trace=collect_trace)
        if trace and logger.isEnabledFor(logging.DEBUG):
            for step in trace:
                logger.debug(step.render())

        report = build_report(algorithm, quantum, table, trace)
        logger.info(
            f"{scheduler.policy_name} finished at t={report.total_time}: "
            f"avg wait {report.average_wait_time:.1f}, "
            f"avg turnaround {report.average_turnaround_time:.1f}"
        )
        return report

    def compare(
        self,
        jobs: Iterable[JobSpec],
        time_quantum: Optional[int] = None,
        collect_trace: bool = False,
    ) -> list[Report]:
        """Run every algorithm over its own copy of the same jobs."""
        job_list = list(jobs)
        return [
            self.run(algorithm, job_list, time_quantum, collect_trace=collect_trace)
            for algorithm in Algorithm
        ]

    def _build_table(self, jobs: Iterable[JobSpec]) -> list[Job]:
        """
        Copy the caller's jobs into a brand-new table.

        The caller's Job objects are never touched, so the same list can be
        fed to several algorithms.
        """
        table: list[Job] = []
        seen: set[str] = set()

        for position, item in enumerate(jobs):
            if isinstance(item, Job):
                name, burst_time = item.name, item.burst_time
            else:
                try:
                    name, burst_time = item
                except (TypeError, ValueError):
                    raise InputError(
                        f"Job #{position}: expected (name, burst_time), got {item!r}"
                    ) from None

            if not isinstance(name, str) or not name:
                raise InputError(f"Job #{position}: missing name")
            if name in seen:
                raise InputError(f"Job #{position}: duplicate name {name!r}")
            if isinstance(burst_time, bool) or not isinstance(burst_time, int):
                raise InputError(f"Job {name!r}: burst time must be an integer, got {burst_time!r}")
            if burst_time <= 0:
                raise InputError(f"Job {name!r}: burst time must be > 0, got {burst_time}")

            seen.add(name)
            table.append(Job(name=name, burst_time=burst_time))

        if not table:
            raise ConfigurationError("No jobs to schedule")
        if self._max_jobs is not None and len(table) > self._max_jobs:
            raise ConfigurationError(
                f"Too many jobs: {len(table)} (limit is {self._max_jobs})"
            )
        return table


def run(
    algorithm: Union[Algorithm, str],
    jobs: Iterable[JobSpec],
    time_quantum: Optional[int] = None,
    collect_trace: bool = False,
) -> Report:
    """Run one simulation with the default engine settings."""
    return SchedulerEngine().run(algorithm, jobs, time_quantum, collect_trace=collect_trace)
