"""
Stats service orchestrator.

Assembles the dashboard snapshot from five independent reads (summary,
status distribution, recent jobs, location candidates, usernames). Each read
runs in its own session so they execute concurrently; if any of them fails
the others are cancelled and no partial snapshot is returned.

Map points here use the strict extractor (``data.latitude`` /
``data.longitude`` only). The phone drill-down uses the tolerant one, so the
two views can disagree about which jobs have a location.

Dependencies: sqlalchemy, lookup_dashboard.boundary.db, lookup_dashboard.core
System role: Stats assembly façade
"""

import asyncio
import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lookup_dashboard.boundary.db.CRUD.job_crud import job_crud
from lookup_dashboard.boundary.db.errors import translate_store_errors
from lookup_dashboard.configs.dashboard import DashboardSettings
from lookup_dashboard.core.job_filter import JobFilter, start_of_day
from lookup_dashboard.core.location_extractor import extract_strict
from lookup_dashboard.core.status_groups import status_group
from lookup_dashboard.models.job import JobRecord, LocationResponse
from lookup_dashboard.models.stats import StatsSnapshotResponse, StatusCount

logger = logging.getLogger(__name__)

Query = Callable[[AsyncSession], Awaitable[Any]]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StatsService:
    """
    Stats service orchestrator.

    Recomputes the snapshot from the store on every call; nothing is cached.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        settings: DashboardSettings,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Initialize stats service.

        Args:
            session_factory: Factory for read-only sessions, one per query
            settings: Dashboard limits
            clock: Source of "now", used for the today boundary
        """
        self.session_factory = session_factory
        self.settings = settings
        self.clock = clock

    async def _run(self, query: Query) -> Any:
        async with self.session_factory() as session:
            return await query(session)

    async def _run_concurrently(self, *queries: Query) -> list[Any]:
        tasks = [asyncio.create_task(self._run(query)) for query in queries]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def get_stats(self, job_filter: JobFilter) -> StatsSnapshotResponse:
        """
        Build the stats snapshot for the given filter.

        Args:
            job_filter: User/date criteria applied to every filtered query

        Returns:
            StatsSnapshotResponse: Counts, status distribution, recent jobs,
            strict-mode locations and all known usernames

        Raises:
            StoreError: If any constituent query fails
        """
        today_start = start_of_day(self.clock())
        logger.info(
            "Assembling stats snapshot",
            extra={
                "username": job_filter.username,
                "start_date": str(job_filter.start_date),
                "end_date": str(job_filter.end_date),
            },
        )

        with translate_store_errors("stats"):
            summary, status_rows, recent, candidates, users = await self._run_concurrently(
                lambda s: job_crud.get_summary(s, job_filter, today_start),
                lambda s: job_crud.get_status_counts(s, job_filter),
                lambda s: job_crud.get_recent(s, job_filter, self.settings.recent_jobs_limit),
                lambda s: job_crud.get_location_candidates(s, job_filter),
                job_crud.get_distinct_usernames,
            )

        locations = []
        for candidate in candidates:
            coordinates = extract_strict(candidate.result)
            if coordinates is None:
                continue
            locations.append(
                LocationResponse(
                    lat=coordinates.lat,
                    lng=coordinates.lng,
                    phone=candidate.phone,
                    created_at=candidate.created_at,
                )
            )

        return StatsSnapshotResponse(
            total_req=summary.total,
            today_req=summary.today,
            total_numbers=summary.distinct_phones,
            avg_time=summary.avg_completion_seconds,
            status_counts=group_status_counts(status_rows),
            recent_jobs=[JobRecord.model_validate(job) for job in recent],
            locations=locations,
            users=users,
        )


def group_status_counts(rows: list[tuple[str | None, int]]) -> list[StatusCount]:
    """
    Fold raw per-status counts into status groups.

    Largest group first; ties ordered by label.
    """
    counts: Counter[str] = Counter()
    for status, count in rows:
        counts[status_group(status)] += count
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [StatusCount(status=label, count=count) for label, count in ordered]
