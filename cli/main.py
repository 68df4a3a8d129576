"""
Command-line entry point for running one simulation over a job file.

Usage:
    python -m cli.main fcfs data/sample_jobs.txt     # First Come First Served
    python -m cli.main sjf jobs.txt                  # Shortest Job First
    python -m cli.main rr jobs.txt --quantum 2       # Round Robin
    python -m cli.main rr jobs.txt -q 4 --no-trace   # report only
    python -m cli.main fcfs jobs.txt --name-width 4  # keep 4-character names

The job file holds one `name,burst_time` record per line.

Output is the classic text report: a header, the execution trace (one line
per time unit or RR slice), then per-job waiting/turnaround times and the two
averages. On any configuration or input error nothing but the error is
printed, and the exit status is 1.
"""

import argparse
import logging
import sys
from typing import Optional

from config.settings import settings
from models.enums import Algorithm
from scheduler.engine import SchedulerEngine
from scheduler.exceptions import ConfigurationError, SchedulerError
from scheduler.ingest import load_jobs
from scheduler.report import Report

logger = logging.getLogger(__name__)


def format_report(report: Report, include_trace: bool = True) -> str:
    if report.algorithm == Algorithm.RR:
        lines = [f"{report.algorithm.label} with quantum {report.time_quantum}"]
    else:
        lines = [report.algorithm.label]

    if include_trace:
        lines.extend(step.render() for step in report.trace)
    lines.append("")

    for result in report.results:
        lines.append(result.name)
        lines.append(f"\tWaiting time:           {result.wait_time}")
        lines.append(f"\tTurnaround time:        {result.turnaround_time}")
        lines.append("")

    lines.append(f"Total average waiting time:     {report.average_wait_time:.1f}")
    lines.append(f"Total average turnaround time:  {report.average_turnaround_time:.1f}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CPU Scheduling Simulator")
    parser.add_argument(
        "algorithm", type=str,
        help="Scheduling algorithm: fcfs, sjf or rr",
    )
    parser.add_argument(
        "job_file", type=str,
        help="File with one 'name,burst_time' record per line",
    )
    parser.add_argument(
        "-q", "--quantum", type=int, default=None,
        help="Round Robin time quantum (required for rr)",
    )
    parser.add_argument(
        "--trace", action=argparse.BooleanOptionalAction, default=True,
        help="Print the execution trace (default: on)",
    )
    parser.add_argument(
        "--max-jobs", type=int, default=None,
        help="Reject job files with more jobs than this (default: settings.MAX_JOBS)",
    )
    parser.add_argument(
        "--name-width", type=int, default=settings.JOB_NAME_MAX_LENGTH,
        help=(
            "Cut job names to this many characters (default: %(default)s). "
            "Names are cut before duplicates are checked, so P100 and P101 "
            "collide at width 3"
        ),
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        if args.name_width <= 0:
            raise ConfigurationError(f"Invalid name width: {args.name_width} (must be > 0)")
        jobs = load_jobs(args.job_file, name_width=args.name_width)
        report = SchedulerEngine(max_jobs=args.max_jobs).run(
            args.algorithm, jobs, args.quantum, collect_trace=args.trace
        )
    except SchedulerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_report(report, include_trace=args.trace))
    return 0


if __name__ == "__main__":
    sys.exit(main())
