"""
Report aggregation.

Turns a completed Job Table into the numbers a caller actually wants:
per-job wait/turnaround, the order jobs finished in, and the two averages
rounded to one decimal place.

There is no error path here: the engine only calls build_report() after the
algorithm has driven every job to FINISHED.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.enums import Algorithm
from scheduler.base import Job, TraceStep


@dataclass
class JobResult:
    name: str
    burst_time: int
    wait_time: int
    turnaround_time: int


@dataclass
class Report:
    algorithm: Algorithm
    time_quantum: Optional[int]
    results: list[JobResult]      # Job Table order after the run
    completion_order: list[str]   # job names, first finished first
    total_time: int               # simulated time at the end of the run
    average_wait_time: float
    average_turnaround_time: float
    trace: list[TraceStep] = field(default_factory=list)

    @property
    def job_count(self) -> int:
        return len(self.results)


def build_report(
    algorithm: Algorithm,
    time_quantum: Optional[int],
    jobs: list[Job],
    trace: list[TraceStep],
) -> Report:
    count = len(jobs)
    total_wait = sum(job.wait_time for job in jobs)
    total_turnaround = sum(job.turnaround_time for job in jobs)

    # All arrivals are at 0, so completion time == turnaround, and no two
    # jobs can complete at the same instant on a single CPU.
    finished_first = sorted(jobs, key=lambda job: job.turnaround_time)

    return Report(
        algorithm=algorithm,
        time_quantum=time_quantum,
        results=[
            JobResult(
                name=job.name,
                burst_time=job.burst_time,
                wait_time=job.wait_time,
                turnaround_time=job.turnaround_time,
            )
            for job in jobs
        ],
        completion_order=[job.name for job in finished_first],
        total_time=max((job.turnaround_time for job in jobs), default=0),
        average_wait_time=round(total_wait / count, 1),
        average_turnaround_time=round(total_turnaround / count, 1),
        trace=trace,
    )
