"""
Number profile API endpoints.

Routes:
- GET /numbers - Busiest phone numbers with job counts
- GET /numbers/profile - Drill-down for one phone number

Dependencies: lookup_dashboard.application.services.job_service
System role: Numbers intel HTTP API
"""

from fastapi import APIRouter, Depends, Query

from lookup_dashboard.api.deps import get_job_service
from lookup_dashboard.application.services.job_service import JobService
from lookup_dashboard.models.job import NumberProfileResponse, PhoneActivityResponse

router = APIRouter(prefix="/numbers", tags=["numbers"])


@router.get("", response_model=list[NumberProfileResponse])
async def list_number_profiles(
    username: str | None = Query(default=None, description='Owner filter; "all" or empty for everyone'),
    job_service: JobService = Depends(get_job_service),
) -> list[NumberProfileResponse]:
    """
    List per-phone job counts, highest total first, capped at numbers_limit.

    Args:
        username: Owner filter
        job_service: Injected JobService

    Returns:
        list[NumberProfileResponse]: phone, total, last_seen
    """
    return await job_service.get_number_profiles(username)


@router.get("/profile", response_model=PhoneActivityResponse)
async def get_phone_profile(
    phone: str = Query(min_length=1, description="Exact phone number"),
    job_service: JobService = Depends(get_job_service),
) -> PhoneActivityResponse:
    """
    Get outcome counts, chart buckets, map points and history for one phone.

    Map points use the tolerant extractor (top level, location, data).
    """
    return await job_service.get_phone_activity(phone)
