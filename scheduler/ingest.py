"""
Job list ingestion.

Reads the line-oriented job format the simulator has always accepted:

    P0,5
    P1,3
    P2,8

One `name,burst_time` record per line. Blank lines are skipped, whitespace
around fields is ignored, and names are cut to a fixed width
(settings.JOB_NAME_MAX_LENGTH). Anything else that is wrong with a line is an
InputError that names the line, so the engine only ever sees clean records.
"""

import logging
from typing import Iterable, Optional

from config.settings import settings
from scheduler.exceptions import InputError

logger = logging.getLogger(__name__)


def parse_jobs(
    lines: Iterable[str], name_width: Optional[int] = None
) -> list[tuple[str, int]]:
    """Parse `name,burst_time` lines into (name, burst_time) pairs, in order."""
    width = name_width if name_width is not None else settings.JOB_NAME_MAX_LENGTH
    jobs: list[tuple[str, int]] = []

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        fields = line.split(",")
        if len(fields) < 2:
            raise InputError(f"Line {line_number}: expected 'name,burst_time', got {line.strip()!r}")

        name = fields[0].strip()[:width]
        if not name:
            raise InputError(f"Line {line_number}: missing job name")

        raw_burst = fields[1].strip()
        try:
            burst_time = int(raw_burst)
        except ValueError:
            raise InputError(
                f"Line {line_number}: burst time {raw_burst!r} is not an integer"
            ) from None
        if burst_time <= 0:
            raise InputError(f"Line {line_number}: burst time must be > 0, got {burst_time}")

        jobs.append((name, burst_time))

    return jobs


def load_jobs(path: str, name_width: Optional[int] = None) -> list[tuple[str, int]]:
    """Read and parse a job file. A file that can't be opened or decoded is an InputError."""
    try:
        with open(path, encoding="utf-8") as f:
            jobs = parse_jobs(f, name_width=name_width)
    except OSError as e:
        raise InputError(f"Failed to open job file {path!r}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise InputError(
            f"Job file {path!r} is not valid UTF-8 (byte offset {e.start})"
        ) from e

    logger.info(f"Loaded {len(jobs)} jobs from {path}")
    return jobs
