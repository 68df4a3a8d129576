"""
Shortest Job First (SJF) scheduler, non-preemptive.

The table is sorted once by burst_time and then executed exactly like FCFS.
Since every job arrives at time 0 and nothing is preempted, sorting up front
is the same as always picking the shortest remaining job.

The sort must be stable: two jobs with equal bursts keep their input order.
list.sort() guarantees that, so no explicit tiebreaker is needed.

Minimizes average wait time for a fixed job set.
"""

from scheduler.base import Job, TraceStep
from scheduler.fcfs import FCFSScheduler


class SJFScheduler(FCFSScheduler):

    def run(self, jobs: list[Job], collect_trace: bool = True) -> list[TraceStep]:
        jobs.sort(key=lambda job: job.burst_time)
        return super().run(jobs, collect_trace)

    @property
    def policy_name(self) -> str:
        return "sjf"
