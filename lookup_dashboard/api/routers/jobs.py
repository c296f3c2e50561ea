"""
Job API endpoints.

Routes:
- GET /jobs - Most recent jobs, optionally for one phone
- GET /jobs/phone-history - Full history of one phone
- GET /jobs/{id} - Single job

Dependencies: lookup_dashboard.application.services.job_service
System role: Job listing HTTP API
"""

from fastapi import APIRouter, Depends, Query

from lookup_dashboard.api.deps import get_job_service
from lookup_dashboard.application.services.job_service import JobService
from lookup_dashboard.models.job import JobRecord

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=list[JobRecord])
async def list_jobs(
    phone: str | None = Query(default=None, description="Exact phone filter"),
    limit: int | None = Query(default=None, ge=1, description="Page size (default 100)"),
    job_service: JobService = Depends(get_job_service),
) -> list[JobRecord]:
    """
    List the most recent jobs.

    Args:
        phone: Exact phone filter
        limit: Maximum number of jobs
        job_service: Injected JobService

    Returns:
        list[JobRecord]: Jobs newest first

    Raises:
        400: limit above the configured maximum
        500: Store failure
    """
    return await job_service.list_jobs(phone=phone, limit=limit)


@router.get("/phone-history", response_model=list[JobRecord])
async def get_phone_history(
    phone: str = Query(min_length=1, description="Exact phone number"),
    job_service: JobService = Depends(get_job_service),
) -> list[JobRecord]:
    """Every job for one phone, newest first, without a cap."""
    return await job_service.get_phone_history(phone)


@router.get("/{job_id}", response_model=JobRecord)
async def get_job(
    job_id: str,
    job_service: JobService = Depends(get_job_service),
) -> JobRecord:
    """
    Get a single job including its raw result payload.

    Raises:
        404: Job not found
    """
    return await job_service.get_job(job_id)
