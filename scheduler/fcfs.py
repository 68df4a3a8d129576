"""
First Come First Served (FCFS) scheduler.

Jobs run in table order, back-to-back, with no gaps. Every job waits for the
sum of the bursts ahead of it:

    wait[i]       = burst[0] + ... + burst[i-1]
    turnaround[i] = wait[i] + burst[i]

Deterministic: the input order is the schedule, so there are no ties.

Downside: one long job delays everything behind it (the "convoy effect").
"""

from models.enums import JobState
from scheduler.base import AbstractScheduler, Job, TraceStep


class FCFSScheduler(AbstractScheduler):

    def run(self, jobs: list[Job], collect_trace: bool = True) -> list[TraceStep]:
        trace: list[TraceStep] = []
        current_time = 0

        for job in jobs:
            job.state = JobState.RUNNING
            job.wait_time = current_time - job.arrival_time
            projected_turnaround = current_time + job.burst_time

            if collect_trace:
                for elapsed in range(job.burst_time):
                    trace.append(TraceStep(
                        time=current_time + elapsed,
                        job_name=job.name,
                        run_time=1,
                        burst_left=job.burst_time - elapsed,
                        wait_time=job.wait_time,
                        turnaround_time=projected_turnaround,
                    ))

            current_time += job.burst_time
            job.finish(current_time)

        return trace

    @property
    def policy_name(self) -> str:
        return "fcfs"
