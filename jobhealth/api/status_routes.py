"""API routes for the jobs status.

Endpoints (below the management context path, ``/internal`` by default):
  GET  /status/jobs               composite status of all jobs
  GET  /status/jobs/{job_type}    status of a single job
  GET  /jobs/definitions          known jobs and their status calculator
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ..status.domain import Status
from ..status.indicator import JobsStatusIndicator

logger = logging.getLogger(__name__)

status_router = APIRouter()


class StatusDetailResponse(BaseModel):
    name: str
    status: str
    message: str
    details: dict[str, str] = {}


def _indicator(request: Request) -> JobsStatusIndicator:
    return request.app.state.jobs_status_indicator


@status_router.get("/status/jobs", response_model=StatusDetailResponse)
def jobs_status(request: Request) -> StatusDetailResponse:
    """Composite status over all configured jobs."""
    detail = _indicator(request).status_detail()
    if detail.status is not Status.OK:
        logger.info("Jobs status %s: %s", detail.status.value, detail.message)
    return StatusDetailResponse(**detail.to_dict())


@status_router.get("/status/jobs/{job_type}", response_model=StatusDetailResponse)
def job_status(job_type: str, request: Request) -> StatusDetailResponse:
    """Status of one job, matched by normalized job type."""
    detail = _indicator(request).job_status_detail(job_type)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Job not found: {job_type}")
    return StatusDetailResponse(**detail.to_dict())


@status_router.get("/jobs/definitions")
def job_definitions(request: Request) -> dict[str, Any]:
    """List job definitions with the calculator selected for each."""
    indicator = _indicator(request)
    jobs = []
    for d in indicator.provider.get_job_definitions():
        jobs.append({
            "job_type": d.job_type,
            "job_name": d.job_name,
            "description": d.description,
            "cron": d.cron,
            "fixed_delay_seconds": d.fixed_delay.total_seconds() if d.fixed_delay else None,
            "max_age_seconds": d.max_age.total_seconds() if d.max_age else None,
            "calculator": indicator.resolver.calculator_for(d).key,
        })
    return {"jobs": jobs, "calculators": indicator.resolver.registry.keys()}
