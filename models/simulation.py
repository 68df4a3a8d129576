"""
SimulationRun ORM model: maps to the "simulation_runs" table.

One row per report produced through the API. The Job Table itself is never
stored; only what the report says about it:
- algorithm / time_quantum: how the run was configured
- results: per-job wait and turnaround, in Job Table order after the run
- completion_order: job names in the order they finished
- the two averages as reported (already rounded to one decimal)

JSON columns become JSONB on PostgreSQL and plain JSON elsewhere (SQLite in tests).
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, String, Integer, Float, DateTime, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base
from scheduler.report import Report

_JSON = JSON().with_variant(JSONB(), "postgresql")


class SimulationRun(Base):
    __tablename__ = "simulation_runs"

    # ── Identity ────────────────────────────────────────────────
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # ── Configuration ───────────────────────────────────────────
    algorithm: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    time_quantum: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # ── Outcome ─────────────────────────────────────────────────
    job_count: Mapped[int] = mapped_column(Integer, nullable=False)
    total_time: Mapped[int] = mapped_column(Integer, nullable=False)
    average_wait_time: Mapped[float] = mapped_column(Float, nullable=False)
    average_turnaround_time: Mapped[float] = mapped_column(Float, nullable=False)
    results: Mapped[list] = mapped_column(_JSON, default=list, nullable=False)
    completion_order: Mapped[list] = mapped_column(_JSON, default=list, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    @classmethod
    def from_report(cls, report: Report) -> "SimulationRun":
        return cls(
            algorithm=report.algorithm.value,
            time_quantum=report.time_quantum,
            job_count=report.job_count,
            total_time=report.total_time,
            average_wait_time=report.average_wait_time,
            average_turnaround_time=report.average_turnaround_time,
            results=[
                {
                    "name": r.name,
                    "burst_time": r.burst_time,
                    "wait_time": r.wait_time,
                    "turnaround_time": r.turnaround_time,
                }
                for r in report.results
            ],
            completion_order=list(report.completion_order),
        )

    def __repr__(self) -> str:
        return f"<SimulationRun {self.id} [{self.algorithm}] jobs={self.job_count}>"
