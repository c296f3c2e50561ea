"""
Job read operations.

Query shapes behind the dashboard: filtered aggregates, status counts,
recency listings, location candidates and per-phone grouping. Every
filtered query goes through ``apply_filter`` so one request applies the same
criteria everywhere.

Dependencies: sqlalchemy, lookup_dashboard.boundary.db.models.job_model
System role: Job filter & aggregator (SQL side)
"""

from datetime import datetime
from typing import NamedTuple, Sequence

from sqlalchemy import Select, case, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lookup_dashboard.boundary.db.CRUD.base_crud import BaseCRUD
from lookup_dashboard.boundary.db.expressions import epoch_seconds
from lookup_dashboard.boundary.db.models.job_model import JobModel
from lookup_dashboard.core.job_filter import JobFilter
from lookup_dashboard.core.status_groups import SUCCESS_STATUSES


class JobSummary(NamedTuple):
    """Scalar aggregates over a filtered job set."""

    total: int
    today: int
    distinct_phones: int
    avg_completion_seconds: float


class LocationCandidate(NamedTuple):
    result: str | None
    phone: str
    created_at: datetime


class PhoneCount(NamedTuple):
    phone: str
    total: int
    last_seen: datetime


class JobCRUD(BaseCRUD[JobModel]):
    """
    Read operations for JobModel.

    Extends BaseCRUD with the aggregate and listing queries used by the
    stats, numbers and jobs views.
    """

    def __init__(self) -> None:
        """Initialize JobCRUD with JobModel."""
        super().__init__(JobModel)

    @staticmethod
    def apply_filter(stmt: Select, job_filter: JobFilter) -> Select:
        """
        Add user and date-range predicates to a statement.

        Args:
            stmt: Statement selecting from the jobs table
            job_filter: Criteria to apply

        Returns:
            Select: Statement with WHERE clauses appended
        """
        if job_filter.username is not None:
            stmt = stmt.where(JobModel.username == job_filter.username)
        if job_filter.created_from is not None:
            stmt = stmt.where(JobModel.created_at >= job_filter.created_from)
        if job_filter.created_before is not None:
            stmt = stmt.where(JobModel.created_at < job_filter.created_before)
        return stmt

    async def get_summary(
        self,
        session: AsyncSession,
        job_filter: JobFilter,
        today_start: datetime,
    ) -> JobSummary:
        """
        Compute total, today's, distinct-phone counts and mean completion time.

        Completion time is ``updated_at - created_at`` in seconds, averaged over
        success/completed jobs only. No qualifying jobs gives 0.

        Args:
            session: Async database session
            job_filter: Criteria to apply
            today_start: Start of the current day (UTC)

        Returns:
            JobSummary: Aggregates for the filtered set
        """
        duration = epoch_seconds(JobModel.updated_at) - epoch_seconds(JobModel.created_at)
        stmt = select(
            func.count(),
            func.count(case((JobModel.created_at >= today_start, 1))),
            func.count(distinct(JobModel.phone)),
            func.avg(case((JobModel.status.in_(SUCCESS_STATUSES), duration))),
        ).select_from(JobModel)
        stmt = self.apply_filter(stmt, job_filter)

        result = await session.execute(stmt)
        total, today, phones, avg_seconds = result.one()
        return JobSummary(
            total=int(total or 0),
            today=int(today or 0),
            distinct_phones=int(phones or 0),
            avg_completion_seconds=float(avg_seconds or 0),
        )

    async def get_status_counts(
        self,
        session: AsyncSession,
        job_filter: JobFilter,
    ) -> list[tuple[str | None, int]]:
        """
        Count filtered jobs per raw status value.

        Args:
            session: Async database session
            job_filter: Criteria to apply

        Returns:
            list of (status, count); status may be None
        """
        stmt = select(JobModel.status, func.count()).group_by(JobModel.status)
        stmt = self.apply_filter(stmt, job_filter)
        result = await session.execute(stmt)
        return [(status, int(count)) for status, count in result.all()]

    async def get_recent(
        self,
        session: AsyncSession,
        job_filter: JobFilter,
        limit: int,
    ) -> Sequence[JobModel]:
        """
        Retrieve the most recent filtered jobs.

        Args:
            session: Async database session
            job_filter: Criteria to apply
            limit: Maximum number of jobs to return

        Returns:
            Sequence of JobModels, newest first
        """
        stmt = self.apply_filter(select(JobModel), job_filter)
        stmt = stmt.order_by(JobModel.created_at.desc()).limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_location_candidates(
        self,
        session: AsyncSession,
        job_filter: JobFilter,
    ) -> list[LocationCandidate]:
        """
        Retrieve successful jobs whose payload mentions latitude and longitude.

        The LIKE checks only narrow the scan; payloads still have to pass the
        strict extractor.

        Args:
            session: Async database session
            job_filter: Criteria to apply

        Returns:
            list of LocationCandidate, newest first
        """
        stmt = select(JobModel.result, JobModel.phone, JobModel.created_at).where(
            JobModel.status.in_(SUCCESS_STATUSES),
            JobModel.result.like('%"latitude":%'),
            JobModel.result.like('%"longitude":%'),
        )
        stmt = self.apply_filter(stmt, job_filter).order_by(JobModel.created_at.desc())
        result = await session.execute(stmt)
        return [LocationCandidate(*row) for row in result.all()]

    async def get_distinct_usernames(self, session: AsyncSession) -> list[str]:
        """
        List every non-null username in the table, sorted.

        Deliberately unfiltered: it feeds the user selector.

        Args:
            session: Async database session

        Returns:
            list of usernames
        """
        stmt = (
            select(JobModel.username)
            .where(JobModel.username.is_not(None))
            .distinct()
            .order_by(JobModel.username)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def get_phone_counts(
        self,
        session: AsyncSession,
        job_filter: JobFilter,
        limit: int,
    ) -> list[PhoneCount]:
        """
        Group filtered jobs by phone.

        Args:
            session: Async database session
            job_filter: Criteria to apply
            limit: Maximum number of phones to return

        Returns:
            list of PhoneCount ordered by total descending
        """
        total = func.count().label("total")
        last_seen = func.max(JobModel.created_at).label("last_seen")
        stmt = select(JobModel.phone, total, last_seen).group_by(JobModel.phone)
        stmt = self.apply_filter(stmt, job_filter)
        stmt = stmt.order_by(total.desc(), last_seen.desc()).limit(limit)
        result = await session.execute(stmt)
        return [PhoneCount(phone, int(count), seen) for phone, count, seen in result.all()]

    async def list_jobs(
        self,
        session: AsyncSession,
        phone: str | None = None,
        limit: int | None = None,
    ) -> Sequence[JobModel]:
        """
        Retrieve jobs newest first, optionally for one phone.

        Args:
            session: Async database session
            phone: Exact phone match, or None for all phones
            limit: Maximum number of jobs (None for all)

        Returns:
            Sequence of JobModels
        """
        stmt = select(JobModel)
        if phone is not None:
            stmt = stmt.where(JobModel.phone == phone)
        stmt = stmt.order_by(JobModel.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


job_crud = JobCRUD()
