"""
Overview service.

Store-wide totals, worker log listing and the database liveness probe.

Dependencies: sqlalchemy, lookup_dashboard.boundary.db.CRUD
System role: Overview and health orchestration
"""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lookup_dashboard.boundary.db.CRUD.job_crud import job_crud
from lookup_dashboard.boundary.db.CRUD.log_crud import log_crud
from lookup_dashboard.boundary.db.errors import translate_store_errors
from lookup_dashboard.configs.dashboard import DashboardSettings
from lookup_dashboard.models.overview import LogEntryResponse, OverviewResponse


class OverviewService:
    """Unfiltered overview reads."""

    def __init__(self, db: AsyncSession, settings: DashboardSettings) -> None:
        self.db = db
        self.settings = settings

    async def get_overview(self) -> OverviewResponse:
        """Total job count and the newest worker log timestamp."""
        with translate_store_errors("overview"):
            total_jobs = await job_crud.count(self.db)
            last_log_at = await log_crud.get_last_created_at(self.db)
        return OverviewResponse(total_jobs=total_jobs, last_log_at=last_log_at)

    async def list_logs(
        self,
        log_type: str | None = None,
        limit: int | None = None,
    ) -> list[LogEntryResponse]:
        """Newest worker log entries, optionally of one type."""
        with translate_store_errors("logs"):
            rows = await log_crud.get_recent(
                self.db,
                log_type or None,
                limit or self.settings.logs_default_limit,
            )
        return [LogEntryResponse(**row) for row in rows]

    async def get_server_time(self) -> datetime:
        """Round-trip to the store; returns its current timestamp."""
        with translate_store_errors("health"):
            result = await self.db.execute(select(func.current_timestamp()))
            return result.scalar_one()
