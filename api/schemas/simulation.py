"""
Pydantic schemas for the /simulations endpoints.

These define the HTTP contract, not the database layout:
- JobIn: one (name, burst_time) record in a request
- SimulationCreate: body of POST /simulations/
- CompareRequest: body of POST /simulations/compare
- ReportOut: a report as computed (read straight from scheduler.report.Report)
- SimulationResponse: a stored report (ReportOut + id + created_at)
- SimulationListResponse / SimulationStats: history views

Shape problems (burst_time=0, missing name) are rejected by FastAPI with 422
before the simulator runs. Configuration problems the simulator itself
detects (unknown algorithm, quantum <= 0, empty job list) come back as 400.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from config.settings import settings
from models.enums import Algorithm


class JobIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=32, examples=["P0"])
    burst_time: int = Field(
        ..., gt=0, le=settings.MAX_BURST_TIME, description="CPU time units the job needs"
    )


class SimulationCreate(BaseModel):
    """Request body for POST /simulations/."""

    algorithm: Optional[Algorithm] = Field(
        default=None,
        description="fcfs, sjf or rr. Falls back to the runtime default when omitted.",
    )
    time_quantum: Optional[int] = Field(
        default=None,
        description="Round Robin slice length. Falls back to the runtime default for rr.",
    )
    jobs: list[JobIn] = Field(
        ...,
        examples=[[{"name": "P0", "burst_time": 5}, {"name": "P1", "burst_time": 3}]],
    )
    include_trace: bool = False


class CompareRequest(BaseModel):
    """Request body for POST /simulations/compare."""

    time_quantum: Optional[int] = None
    jobs: list[JobIn]
    include_trace: bool = False


class JobResultOut(BaseModel):
    name: str
    burst_time: int
    wait_time: int
    turnaround_time: int

    model_config = {"from_attributes": True}


class TraceStepOut(BaseModel):
    time: int
    job_name: str
    run_time: int
    burst_left: int
    wait_time: Optional[int] = None
    turnaround_time: Optional[int] = None

    model_config = {"from_attributes": True}


class ReportOut(BaseModel):
    """A computed report. Reads attributes from Report or SimulationRun alike."""

    algorithm: Algorithm
    time_quantum: Optional[int] = None
    job_count: int
    total_time: int
    average_wait_time: float
    average_turnaround_time: float
    results: list[JobResultOut]
    completion_order: list[str]
    trace: Optional[list[TraceStepOut]] = None

    model_config = {"from_attributes": True}


class SimulationResponse(ReportOut):
    """A stored report: returned by POST /simulations/ and GET /simulations/{id}."""

    id: UUID
    created_at: datetime


class SimulationListResponse(BaseModel):
    simulations: list[SimulationResponse]
    total: int
    page: int
    page_size: int


class AlgorithmStats(BaseModel):
    algorithm: Algorithm
    runs: int
    mean_average_wait_time: float
    mean_average_turnaround_time: float


class SimulationStats(BaseModel):
    """Aggregate history: returned by GET /simulations/stats."""

    total_runs: int
    by_algorithm: list[AlgorithmStats]
