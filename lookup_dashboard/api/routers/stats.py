"""
Stats API endpoints.

Routes: GET /stats

Dependencies: lookup_dashboard.application.services.stats_service
System role: Stats snapshot HTTP API
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from lookup_dashboard.api.deps import get_dashboard_settings, get_stats_service
from lookup_dashboard.application.services.stats_service import StatsService
from lookup_dashboard.configs.dashboard import DashboardSettings
from lookup_dashboard.core.job_filter import JobFilter
from lookup_dashboard.models.stats import StatsSnapshotResponse

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsSnapshotResponse)
async def get_stats(
    username: str | None = Query(default=None, description='Owner filter; "all" or empty for everyone'),
    start_date: date | None = Query(default=None, alias="startDate", description="Inclusive first day (UTC)"),
    end_date: date | None = Query(default=None, alias="endDate", description="Inclusive last day (UTC)"),
    stats_service: StatsService = Depends(get_stats_service),
    settings: DashboardSettings = Depends(get_dashboard_settings),
) -> StatsSnapshotResponse:
    """
    Get the dashboard stats snapshot.

    Recomputed from the store on every call.

    Args:
        username: Owner filter
        start_date: Inclusive lower date bound (YYYY-MM-DD)
        end_date: Inclusive upper date bound (YYYY-MM-DD)
        stats_service: Injected StatsService
        settings: Dashboard settings (all-users sentinel)

    Returns:
        StatsSnapshotResponse: total_req, today_req, total_numbers, avg_time,
        status_counts, recent_jobs, locations, users

    Raises:
        400: startDate after endDate
        422: Unparseable date
        500: Store failure (no partial snapshot)
    """
    job_filter = JobFilter.build(
        username=username,
        start_date=start_date,
        end_date=end_date,
        all_users_sentinel=settings.all_users_sentinel,
    )
    return await stats_service.get_stats(job_filter)
