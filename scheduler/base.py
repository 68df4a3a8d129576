"""
Abstract base class for all scheduling algorithms (Strategy pattern).

The SchedulerEngine only knows about AbstractScheduler: it hands a Job Table
to run() and gets back the execution trace, without caring whether the
algorithm is FCFS, SJF or Round Robin.

To add a new algorithm:
1. Create a new class that inherits AbstractScheduler
2. Implement run() and policy_name
3. Register it in scheduler/registry.py

Job is the row type of the Job Table. Identity (name, burst_time) is fixed at
creation; only the timing/status fields are written, and only by the
algorithm that owns the table for the duration of a run.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from models.enums import JobState


@dataclass
class Job:
    """One schedulable unit of work. All jobs arrive at time 0."""
    name: str
    burst_time: int
    arrival_time: int = 0
    wait_time: int = 0
    turnaround_time: int = 0
    remaining_time: int = field(init=False)
    finished: bool = False
    state: JobState = JobState.WAITING

    def __post_init__(self):
        self.remaining_time = self.burst_time

    def finish(self, completed_at: int) -> None:
        """Record completion at `completed_at` and derive wait from turnaround."""
        self.remaining_time = 0
        self.turnaround_time = completed_at - self.arrival_time
        self.wait_time = self.turnaround_time - self.burst_time
        self.finished = True
        self.state = JobState.FINISHED


@dataclass
class TraceStep:
    """
    One line of the execution trace.

    FCFS/SJF emit one step per simulated time unit (run_time == 1), RR one
    step per slice. wait_time/turnaround_time are None while an RR job still
    has work left.
    """
    time: int
    job_name: str
    run_time: int
    burst_left: int
    wait_time: Optional[int] = None
    turnaround_time: Optional[int] = None

    def render(self) -> str:
        head = f"T{self.time} : {self.job_name} - Burst left {self.burst_left:2d}, "
        if self.turnaround_time is None:
            return head + "Still executing..."
        return head + f"Wait time {self.wait_time:2d}, Turnaround time {self.turnaround_time:2d}"


class AbstractScheduler(ABC):
    """
    Interface that all scheduling algorithms implement.

    run() mutates the given table in place (timing fields, state, and for SJF
    the order itself) and returns the trace it produced. With
    collect_trace=False it returns an empty list and does no per-step work.
    """

    @abstractmethod
    def run(self, jobs: list[Job], collect_trace: bool = True) -> list[TraceStep]:
        """Execute every job in `jobs` to completion."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this algorithm (e.g., 'fcfs', 'sjf')."""
        ...
