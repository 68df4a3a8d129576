"""
Tests for the SchedulerEngine.

These cover the end-to-end contract: validation before anything runs, a
fresh Job Table per run, and the properties every algorithm must satisfy.
"""

import pytest

from models.enums import Algorithm
from scheduler.base import Job
from scheduler.engine import SchedulerEngine, run
from scheduler.exceptions import ConfigurationError, InputError

WORKLOADS = [
    [("P0", 5), ("P1", 3)],
    [("A", 1)],
    [("A", 7), ("B", 2), ("C", 5), ("D", 2)],
    [("x", 4), ("y", 4), ("z", 4)],
    [("P0", 10), ("P1", 1), ("P2", 3), ("P3", 6), ("P4", 2)],
]

SELECTIONS = [
    (Algorithm.FCFS, None),
    (Algorithm.SJF, None),
    (Algorithm.RR, 1),
    (Algorithm.RR, 2),
    (Algorithm.RR, 5),
]


def test_fcfs_scenario(two_jobs):
    report = run("FCFS", two_jobs)

    assert [(r.name, r.wait_time, r.turnaround_time) for r in report.results] == [
        ("P0", 0, 5),
        ("P1", 5, 8),
    ]
    assert report.average_wait_time == 2.5
    assert report.average_turnaround_time == 6.5


def test_sjf_scenario(two_jobs):
    report = run("SJF", two_jobs)

    assert [(r.name, r.wait_time, r.turnaround_time) for r in report.results] == [
        ("P1", 0, 3),
        ("P0", 3, 8),
    ]
    assert report.average_wait_time == 1.5
    assert report.average_turnaround_time == 5.5


def test_round_robin_scenario(two_jobs):
    report = run("RR", two_jobs, time_quantum=2)

    by_name = {r.name: r for r in report.results}
    assert (by_name["P1"].wait_time, by_name["P1"].turnaround_time) == (4, 7)
    assert (by_name["P0"].wait_time, by_name["P0"].turnaround_time) == (3, 8)
    assert report.completion_order == ["P1", "P0"]
    assert report.average_wait_time == 3.5
    assert report.average_turnaround_time == 7.5
    assert report.time_quantum == 2


@pytest.mark.parametrize("jobs", WORKLOADS)
@pytest.mark.parametrize("algorithm, quantum", SELECTIONS)
def test_turnaround_is_wait_plus_burst(jobs, algorithm, quantum):
    report = run(algorithm, jobs, quantum)
    for r in report.results:
        assert r.turnaround_time == r.wait_time + r.burst_time
        assert r.wait_time >= 0


@pytest.mark.parametrize("jobs", WORKLOADS)
@pytest.mark.parametrize("algorithm, quantum", SELECTIONS)
def test_last_completion_equals_total_burst(jobs, algorithm, quantum):
    report = run(algorithm, jobs, quantum)
    total_burst = sum(burst for _, burst in jobs)

    assert max(r.turnaround_time for r in report.results) == total_burst
    assert report.total_time == total_burst


@pytest.mark.parametrize("jobs", WORKLOADS)
def test_round_robin_quantum_one_takes_as_long_as_fcfs(jobs):
    assert run("rr", jobs, 1).total_time == run("fcfs", jobs).total_time


@pytest.mark.parametrize("algorithm, quantum", SELECTIONS)
def test_single_job(algorithm, quantum):
    report = run(algorithm, [("solo", 6)], quantum)
    only = report.results[0]

    assert (only.wait_time, only.turnaround_time) == (0, 6)
    assert report.average_wait_time == 0.0
    assert report.average_turnaround_time == 6.0


def test_averages_rounded_to_one_decimal():
    report = run("fcfs", [("A", 1), ("B", 1), ("C", 1)])
    # waits 0, 1, 2 → 1.0; turnarounds 1, 2, 3 → 2.0
    assert report.average_wait_time == 1.0

    report = run("fcfs", [("A", 2), ("B", 2), ("C", 3)])
    # waits 0, 2, 4 → 2.0; turnarounds 2, 4, 7 → 4.333...
    assert report.average_turnaround_time == 4.3


def test_caller_jobs_are_not_mutated():
    jobs = [Job(name="P0", burst_time=5), Job(name="P1", burst_time=3)]
    run("sjf", jobs)

    assert [j.name for j in jobs] == ["P0", "P1"]
    assert all(j.wait_time == 0 and not j.finished for j in jobs)


def test_same_jobs_give_same_fcfs_report(two_jobs):
    assert run("fcfs", two_jobs).results == run("fcfs", two_jobs).results


def test_compare_runs_every_algorithm_on_independent_copies(two_jobs):
    reports = SchedulerEngine().compare(two_jobs, time_quantum=2)

    assert [r.algorithm for r in reports] == [Algorithm.FCFS, Algorithm.SJF, Algorithm.RR]
    assert [r.average_wait_time for r in reports] == [2.5, 1.5, 3.5]
    assert [r.results[0].name for r in reports] == ["P0", "P1", "P0"]


def test_quantum_not_reported_for_non_preemptive(two_jobs):
    assert run("fcfs", two_jobs, time_quantum=4).time_quantum is None


def test_trace_is_returned_on_request(two_jobs):
    report = run("rr", two_jobs, 2, collect_trace=True)
    assert [s.time for s in report.trace] == [2, 4, 6, 7, 8]


@pytest.mark.parametrize("algorithm", ["fcfs", "sjf", "rr"])
def test_trace_not_built_by_default(algorithm):
    report = run(algorithm, [("P0", 3_000_000), ("P1", 2)], time_quantum=1_000_000)

    assert report.trace == []
    assert report.total_time == 3_000_002


def test_compare_collects_trace_on_request(two_jobs):
    reports = SchedulerEngine().compare(two_jobs, time_quantum=2, collect_trace=True)

    assert [len(r.trace) for r in reports] == [8, 8, 5]
    assert all(r.trace == [] for r in SchedulerEngine().compare(two_jobs, time_quantum=2))


# ── Configuration errors ────────────────────────────────────────


def test_zero_quantum_round_robin(two_jobs):
    with pytest.raises(ConfigurationError):
        run("RR", two_jobs, time_quantum=0)


def test_unknown_algorithm(two_jobs):
    with pytest.raises(ConfigurationError, match="Unknown"):
        run("LOTTERY", two_jobs)


def test_empty_job_list():
    with pytest.raises(ConfigurationError, match="No jobs"):
        run("fcfs", [])


def test_max_jobs_bound(two_jobs):
    with pytest.raises(ConfigurationError, match="Too many"):
        SchedulerEngine(max_jobs=1).run("fcfs", two_jobs)

    assert SchedulerEngine(max_jobs=2).run("fcfs", two_jobs).job_count == 2


def test_configuration_checked_before_jobs():
    """A bad quantum is reported even when the job list is also bad."""
    with pytest.raises(ConfigurationError, match="quantum"):
        run("rr", [("P0", -1)], time_quantum=0)


# ── Input range checks ──────────────────────────────────────────


@pytest.mark.parametrize("jobs", [
    [("P0", 0)],
    [("P0", -3)],
    [("P0", "5")],
    [("P0", 2.5)],
    [("", 4)],
    [("P0", 1), ("P0", 2)],
    [("P0",)],
])
def test_bad_records_raise_input_error(jobs):
    with pytest.raises(InputError):
        run("fcfs", jobs)
