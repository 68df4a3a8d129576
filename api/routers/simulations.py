"""
Simulation endpoints.

POST /simulations/          → Run one algorithm over a job list, store the report
POST /simulations/compare   → Run all three algorithms over the same jobs (not stored)
GET  /simulations/          → History, newest first, with algorithm filter + pagination
GET  /simulations/stats     → Run counts and mean averages per algorithm
GET  /simulations/{id}      → One stored report

The router stays thin: resolve defaults, call the engine, persist, respond.
The simulation is pure in-memory computation, so it runs inline in the
request. Simulator errors (SchedulerError) become 400 responses.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_db, get_scheduler_defaults
from api.schemas.scheduler import SchedulerDefaults
from api.schemas.simulation import (
    AlgorithmStats,
    CompareRequest,
    JobIn,
    ReportOut,
    SimulationCreate,
    SimulationListResponse,
    SimulationResponse,
    SimulationStats,
    TraceStepOut,
)
from models.enums import Algorithm
from models.simulation import SimulationRun
from scheduler.engine import SchedulerEngine
from scheduler.exceptions import SchedulerError
from scheduler.report import Report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


def _job_pairs(jobs: list[JobIn]) -> list[tuple[str, int]]:
    return [(job.name, job.burst_time) for job in jobs]


def _trace_out(report: Report) -> list[TraceStepOut]:
    return [TraceStepOut.model_validate(step) for step in report.trace]


@router.post("/", response_model=SimulationResponse, status_code=201)
async def create_simulation(
    sim_in: SimulationCreate,
    db: AsyncSession = Depends(get_db),
    defaults: SchedulerDefaults = Depends(get_scheduler_defaults),
) -> SimulationResponse:
    """
    Run a simulation and store its report.

    algorithm falls back to the runtime default. time_quantum falls back to
    the runtime default only for Round Robin; an explicit quantum is passed
    through as-is so a bad value (0, negative) is reported, not replaced.
    """
    algorithm = sim_in.algorithm or defaults.algorithm
    time_quantum = sim_in.time_quantum
    if time_quantum is None and algorithm == Algorithm.RR:
        time_quantum = defaults.time_quantum

    try:
        report = SchedulerEngine().run(
            algorithm,
            _job_pairs(sim_in.jobs),
            time_quantum,
            collect_trace=sim_in.include_trace,
        )
    except SchedulerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    run = SimulationRun.from_report(report)
    db.add(run)
    await db.commit()
    await db.refresh(run)  # reload to get server-generated fields (id, created_at)

    response = SimulationResponse.model_validate(run)
    if sim_in.include_trace:
        response = response.model_copy(update={"trace": _trace_out(report)})
    return response


@router.post("/compare", response_model=list[ReportOut])
async def compare_algorithms(
    compare_in: CompareRequest,
    defaults: SchedulerDefaults = Depends(get_scheduler_defaults),
) -> list[ReportOut]:
    """Same jobs, every algorithm, each on its own copy of the Job Table."""
    time_quantum = compare_in.time_quantum
    if time_quantum is None:
        time_quantum = defaults.time_quantum

    try:
        reports = SchedulerEngine().compare(
            _job_pairs(compare_in.jobs),
            time_quantum,
            collect_trace=compare_in.include_trace,
        )
    except SchedulerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    out = [ReportOut.model_validate(report) for report in reports]
    if not compare_in.include_trace:
        out = [r.model_copy(update={"trace": None}) for r in out]
    return out


@router.get("/", response_model=SimulationListResponse)
async def list_simulations(
    algorithm: Optional[Algorithm] = Query(None, description="Filter by algorithm"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Runs per page"),
    db: AsyncSession = Depends(get_db),
) -> SimulationListResponse:
    conditions = []
    if algorithm:
        conditions.append(SimulationRun.algorithm == algorithm.value)

    total = (
        await db.execute(select(func.count(SimulationRun.id)).where(*conditions))
    ).scalar() or 0

    query = (
        select(SimulationRun)
        .where(*conditions)
        .order_by(SimulationRun.created_at.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    runs = (await db.execute(query)).scalars().all()

    return SimulationListResponse(
        simulations=[SimulationResponse.model_validate(r) for r in runs],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/stats", response_model=SimulationStats)
async def get_simulation_stats(
    db: AsyncSession = Depends(get_db),
) -> SimulationStats:
    """One GROUP BY query: run count and mean averages per algorithm."""
    query = (
        select(
            SimulationRun.algorithm,
            func.count(SimulationRun.id).label("runs"),
            func.avg(SimulationRun.average_wait_time).label("avg_wait"),
            func.avg(SimulationRun.average_turnaround_time).label("avg_turnaround"),
        )
        .group_by(SimulationRun.algorithm)
        .order_by(SimulationRun.algorithm)
    )
    rows = (await db.execute(query)).all()

    by_algorithm = [
        AlgorithmStats(
            algorithm=row.algorithm,
            runs=row.runs,
            mean_average_wait_time=round(row.avg_wait, 2),
            mean_average_turnaround_time=round(row.avg_turnaround, 2),
        )
        for row in rows
    ]
    return SimulationStats(
        total_runs=sum(s.runs for s in by_algorithm),
        by_algorithm=by_algorithm,
    )


@router.get("/{simulation_id}", response_model=SimulationResponse)
async def get_simulation(
    simulation_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SimulationResponse:
    result = await db.execute(select(SimulationRun).where(SimulationRun.id == simulation_id))
    run = result.scalar_one_or_none()
    if run is None:
        raise HTTPException(status_code=404, detail=f"Simulation {simulation_id} not found")
    return SimulationResponse.model_validate(run)
