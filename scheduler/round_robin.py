"""
Round Robin scheduler.

Each pending job gets at most one time quantum per round. A round is a single
pass over the table in its original order:

    for each job with remaining_time > 0:
        slice = min(remaining_time, quantum)
        remaining_time -= slice
        current_time   += slice
        if remaining_time == 0:
            turnaround = current_time
            wait       = turnaround - burst

Rounds repeat until every job has finished.

Note this is a fixed-order sweep, not a FIFO queue that re-appends a job at
the moment it is preempted. With staggered completions the two interleave
differently; the sweep is the behavior this simulator reproduces.

Quantum size controls the tradeoff:
- quantum = 1: maximal interleaving
- quantum >= longest burst: identical to FCFS
"""

from typing import Optional

from models.enums import JobState
from scheduler.base import AbstractScheduler, Job, TraceStep
from scheduler.exceptions import ConfigurationError


class RoundRobinScheduler(AbstractScheduler):

    def __init__(self, time_quantum: Optional[int] = None):
        if time_quantum is None:
            raise ConfigurationError("Round Robin requires a time quantum")
        if isinstance(time_quantum, bool) or not isinstance(time_quantum, int):
            raise ConfigurationError(f"Time quantum must be an integer, got {time_quantum!r}")
        if time_quantum <= 0:
            raise ConfigurationError(f"Invalid time quantum: {time_quantum} (must be > 0)")
        self.time_quantum = time_quantum

    def run(self, jobs: list[Job], collect_trace: bool = True) -> list[TraceStep]:
        trace: list[TraceStep] = []
        current_time = 0
        unfinished = sum(1 for job in jobs if job.remaining_time > 0)

        while unfinished > 0:
            for job in jobs:
                if job.remaining_time == 0:
                    continue

                job.state = JobState.RUNNING
                time_slice = min(job.remaining_time, self.time_quantum)
                job.remaining_time -= time_slice
                current_time += time_slice

                if job.remaining_time == 0:
                    job.finish(current_time)
                    unfinished -= 1
                    if collect_trace:
                        trace.append(TraceStep(
                            time=current_time,
                            job_name=job.name,
                            run_time=time_slice,
                            burst_left=0,
                            wait_time=job.wait_time,
                            turnaround_time=job.turnaround_time,
                        ))
                else:
                    job.state = JobState.WAITING
                    if collect_trace:
                        trace.append(TraceStep(
                            time=current_time,
                            job_name=job.name,
                            run_time=time_slice,
                            burst_left=job.remaining_time,
                        ))

        return trace

    @property
    def policy_name(self) -> str:
        return "rr"
