"""
Overview API endpoints.

Routes: GET /overview, GET /logs

Dependencies: lookup_dashboard.application.services.overview_service
System role: Overview and worker log HTTP API
"""

from fastapi import APIRouter, Depends, Query

from lookup_dashboard.api.deps import get_overview_service
from lookup_dashboard.application.services.overview_service import OverviewService
from lookup_dashboard.models.overview import LogEntryResponse, OverviewResponse

router = APIRouter(tags=["overview"])


@router.get("/overview", response_model=OverviewResponse)
async def get_overview(
    overview_service: OverviewService = Depends(get_overview_service),
) -> OverviewResponse:
    """Total jobs and the timestamp of the newest worker log entry."""
    return await overview_service.get_overview()


@router.get("/logs", response_model=list[LogEntryResponse])
async def list_logs(
    log_type: str | None = Query(default=None, alias="type", description='Exact log type, e.g. "error"'),
    limit: int | None = Query(default=None, ge=1, le=1000),
    overview_service: OverviewService = Depends(get_overview_service),
) -> list[LogEntryResponse]:
    """Newest worker log entries, optionally of one type."""
    return await overview_service.list_logs(log_type=log_type, limit=limit)
