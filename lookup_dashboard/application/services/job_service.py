"""
Job service orchestrator.

Job listings, per-number profiles and the per-phone drill-down.

Dependencies: lookup_dashboard.boundary.db.CRUD, lookup_dashboard.core
System role: Per-number profile builder and job listing
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from lookup_dashboard.boundary.db.CRUD.job_crud import job_crud
from lookup_dashboard.boundary.db.errors import translate_store_errors
from lookup_dashboard.configs.dashboard import DashboardSettings
from lookup_dashboard.core.exceptions import InvalidFilterError, JobNotFoundError
from lookup_dashboard.core.job_filter import JobFilter
from lookup_dashboard.core.phone_profile import build_phone_activity
from lookup_dashboard.models.job import (
    ChartBucket,
    JobRecord,
    LocationResponse,
    NumberProfileResponse,
    PhoneActivityResponse,
)

logger = logging.getLogger(__name__)


class JobService:
    """
    Job service orchestrator.

    Read-only views over the jobs table for one request-scoped session.
    """

    def __init__(self, db: AsyncSession, settings: DashboardSettings) -> None:
        """
        Initialize job service.

        Args:
            db: AsyncSession for database operations
            settings: Dashboard limits
        """
        self.db = db
        self.settings = settings

    async def list_jobs(
        self,
        phone: str | None = None,
        limit: int | None = None,
    ) -> list[JobRecord]:
        """
        List the most recent jobs, optionally for one phone.

        Args:
            phone: Exact phone filter
            limit: Page size; defaults to jobs_default_limit

        Returns:
            list[JobRecord]: Jobs newest first

        Raises:
            InvalidFilterError: If limit exceeds jobs_max_limit
        """
        if limit is None:
            limit = self.settings.jobs_default_limit
        if limit > self.settings.jobs_max_limit:
            raise InvalidFilterError(
                f"limit must not exceed {self.settings.jobs_max_limit}",
                field="limit",
            )

        with translate_store_errors("jobs"):
            jobs = await job_crud.list_jobs(self.db, phone=phone or None, limit=limit)
        return [JobRecord.model_validate(job) for job in jobs]

    async def get_job(self, job_id: str) -> JobRecord:
        """
        Get a single job by id.

        Raises:
            JobNotFoundError: If the job doesn't exist
        """
        with translate_store_errors("job"):
            job = await job_crud.get_by_id(self.db, job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return JobRecord.model_validate(job)

    async def get_phone_history(self, phone: str) -> list[JobRecord]:
        """
        All jobs for one phone, newest first, uncapped.

        Args:
            phone: Exact phone number

        Returns:
            list[JobRecord]: The phone's full history
        """
        with translate_store_errors("phone history"):
            jobs = await job_crud.list_jobs(self.db, phone=phone)
        return [JobRecord.model_validate(job) for job in jobs]

    async def get_number_profiles(self, username: str | None = None) -> list[NumberProfileResponse]:
        """
        Per-phone job counts for the busiest numbers.

        Args:
            username: Owner filter; empty or the "all" sentinel means all users

        Returns:
            list[NumberProfileResponse]: At most numbers_limit entries, by total descending
        """
        job_filter = JobFilter.build(
            username=username,
            all_users_sentinel=self.settings.all_users_sentinel,
        )
        with translate_store_errors("numbers"):
            rows = await job_crud.get_phone_counts(self.db, job_filter, self.settings.numbers_limit)
        return [
            NumberProfileResponse(phone=row.phone, total=row.total, last_seen=row.last_seen)
            for row in rows
        ]

    async def get_phone_activity(self, phone: str) -> PhoneActivityResponse:
        """
        Drill-down for one phone: outcome counts, chart buckets, tolerant-mode
        locations and the full history.

        Args:
            phone: Exact phone number

        Returns:
            PhoneActivityResponse: Derived profile plus the underlying jobs
        """
        with translate_store_errors("phone history"):
            jobs = await job_crud.list_jobs(self.db, phone=phone)

        activity = build_phone_activity(phone, jobs)
        logger.info(
            "Built phone activity",
            extra={"phone": phone, "total": activity.total, "locations": len(activity.locations)},
        )
        return PhoneActivityResponse(
            phone=phone,
            total=activity.total,
            success=activity.success,
            failed=activity.failed,
            other=activity.other,
            chart_data=[ChartBucket(**bucket) for bucket in activity.chart_data],
            locations=[LocationResponse.model_validate(point) for point in activity.locations],
            jobs=[JobRecord.model_validate(job) for job in jobs],
        )
