"""
Tests for Round Robin scheduler.

RR sweeps the table in its original order, giving every pending job at most
one quantum per sweep, until all jobs are done.
"""

import pytest

from models.enums import JobState
from scheduler.base import Job
from scheduler.exceptions import ConfigurationError
from scheduler.round_robin import RoundRobinScheduler


def _table(*pairs) -> list[Job]:
    return [Job(name=name, burst_time=burst) for name, burst in pairs]


def test_two_job_scenario_slices():
    """P0=5, P1=3, quantum 2: P0@2, P1@4, P0@6, P1@7 (done), P0@8 (done)."""
    jobs = _table(("P0", 5), ("P1", 3))
    trace = RoundRobinScheduler(time_quantum=2).run(jobs)

    assert [(s.job_name, s.run_time, s.burst_left, s.time) for s in trace] == [
        ("P0", 2, 3, 2),
        ("P1", 2, 1, 4),
        ("P0", 2, 1, 6),
        ("P1", 1, 0, 7),
        ("P0", 1, 0, 8),
    ]
    p0, p1 = jobs
    assert (p1.wait_time, p1.turnaround_time) == (4, 7)
    assert (p0.wait_time, p0.turnaround_time) == (3, 8)


def test_time_advances_by_each_slice():
    trace = RoundRobinScheduler(time_quantum=3).run(_table(("A", 7), ("B", 2), ("C", 5)))

    previous = 0
    for step in trace:
        assert step.time - previous == step.run_time
        assert 0 < step.run_time <= 3
        previous = step.time
    assert previous == 14


def test_finished_jobs_are_skipped():
    """B finishes in the first sweep and never appears again."""
    trace = RoundRobinScheduler(time_quantum=2).run(_table(("A", 6), ("B", 1)))
    assert [s.job_name for s in trace] == ["A", "B", "A", "A"]


def test_fixed_order_sweep():
    """
    After C finishes early, A and B keep alternating in table order.
    A rotating queue would give the same here, but the sweep never moves a
    job behind one that was appended later.
    """
    trace = RoundRobinScheduler(time_quantum=1).run(_table(("A", 3), ("B", 2), ("C", 1)))
    assert [s.job_name for s in trace] == ["A", "B", "C", "A", "B", "A"]


def test_burst_equal_to_quantum_finishes_in_one_slice():
    jobs = _table(("P0", 4), ("P1", 4))
    trace = RoundRobinScheduler(time_quantum=4).run(jobs)

    assert len(trace) == 2
    assert (jobs[0].wait_time, jobs[0].turnaround_time) == (0, 4)
    assert (jobs[1].wait_time, jobs[1].turnaround_time) == (4, 8)


def test_large_quantum_behaves_like_fcfs():
    jobs = _table(("P0", 5), ("P1", 3), ("P2", 2))
    RoundRobinScheduler(time_quantum=100).run(jobs)
    assert [j.wait_time for j in jobs] == [0, 5, 8]


def test_preempted_job_returns_to_waiting_until_done():
    jobs = _table(("P0", 3))
    trace = RoundRobinScheduler(time_quantum=1).run(jobs)

    assert [s.turnaround_time for s in trace] == [None, None, 3]
    assert trace[0].render() == "T1 : P0 - Burst left  2, Still executing..."
    assert jobs[0].state == JobState.FINISHED


@pytest.mark.parametrize("quantum", [0, -1, None])
def test_invalid_quantum_rejected(quantum):
    with pytest.raises(ConfigurationError):
        RoundRobinScheduler(time_quantum=quantum)


def test_non_integer_quantum_rejected():
    with pytest.raises(ConfigurationError):
        RoundRobinScheduler(time_quantum=1.5)


def test_time_quantum_is_stored():
    assert RoundRobinScheduler(time_quantum=10).time_quantum == 10


def test_policy_name():
    assert RoundRobinScheduler(time_quantum=1).policy_name == "rr"
