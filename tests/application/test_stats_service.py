"""
Test suite for StatsService.

Runs the façade against a seeded SQLite store with a fixed clock.

System role: Verification of stats assembly
"""

import asyncio
import json
from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from lookup_dashboard.application.services.stats_service import StatsService, group_status_counts
from lookup_dashboard.boundary.db.CRUD.job_crud import job_crud
from lookup_dashboard.core.exceptions import StoreError
from lookup_dashboard.core.job_filter import JobFilter


@pytest.fixture
def stats_service(session_factory, dashboard_settings, now) -> StatsService:
    """Provide StatsService over the seeded store with a fixed clock."""
    return StatsService(session_factory=session_factory, settings=dashboard_settings, clock=lambda: now)


class TestGetStats:
    """Test suite for StatsService.get_stats()."""

    @pytest.mark.asyncio
    async def test_two_job_example(self, seed, stats_service, job_factory) -> None:
        await seed(jobs=[
            job_factory(id="s", phone="1", status="success",
                        result='{"data":{"latitude":"1.5","longitude":"2.5"}}'),
            job_factory(id="f", phone="2", status="failed", result='{"lat":3,"lng":4}'),
        ])

        snapshot = await stats_service.get_stats(JobFilter())

        assert snapshot.total_req == 2
        assert {(c.status, c.count) for c in snapshot.status_counts} == {("success", 1), ("failed", 1)}
        assert len(snapshot.locations) == 1
        location = snapshot.locations[0]
        assert (location.lat, location.lng, location.phone) == (1.5, 2.5, "1")
        assert location.job_id is None

    @pytest.mark.asyncio
    async def test_empty_store(self, stats_service) -> None:
        snapshot = await stats_service.get_stats(JobFilter())

        assert snapshot.total_req == 0
        assert snapshot.today_req == 0
        assert snapshot.total_numbers == 0
        assert snapshot.avg_time == 0
        assert snapshot.status_counts == []
        assert snapshot.recent_jobs == []
        assert snapshot.locations == []
        assert snapshot.users == []

    @pytest.mark.asyncio
    async def test_today_uses_clock(self, seed, stats_service, job_factory, now) -> None:
        midnight = now.replace(hour=0, minute=0)
        await seed(jobs=[
            job_factory(created_at=midnight),
            job_factory(created_at=midnight - timedelta(microseconds=1)),
        ])

        snapshot = await stats_service.get_stats(JobFilter())

        assert snapshot.today_req == 1
        assert snapshot.total_req == 2

    @pytest.mark.asyncio
    async def test_filter_applies_to_every_query_except_users(
        self, seed, stats_service, job_factory
    ) -> None:
        coords = json.dumps({"data": {"latitude": 1, "longitude": 2}})
        await seed(jobs=[
            job_factory(username="alice", phone="1", result=coords),
            job_factory(username="bob", phone="2", result=coords, status="not_found"),
            job_factory(username="bob", phone="3", result=coords),
        ])

        snapshot = await stats_service.get_stats(JobFilter.build(username="alice"))

        assert snapshot.total_req == 1
        assert snapshot.total_numbers == 1
        assert [c.status for c in snapshot.status_counts] == ["success"]
        assert [job.phone for job in snapshot.recent_jobs] == ["1"]
        assert [loc.phone for loc in snapshot.locations] == ["1"]
        assert snapshot.users == ["alice", "bob"]

    @pytest.mark.asyncio
    async def test_date_filter(self, seed, stats_service, job_factory) -> None:
        await seed(jobs=[
            job_factory(created_at=datetime(2026, 10, 1, tzinfo=timezone.utc)),
            job_factory(created_at=datetime(2026, 10, 2, tzinfo=timezone.utc)),
        ])

        snapshot = await stats_service.get_stats(JobFilter(start_date=date(2026, 10, 1), end_date=date(2026, 10, 1)))

        assert snapshot.total_req == 1

    @pytest.mark.asyncio
    async def test_recent_jobs_are_bounded(self, seed, stats_service, job_factory, now) -> None:
        await seed(jobs=[job_factory(created_at=now - timedelta(minutes=i)) for i in range(15)])

        snapshot = await stats_service.get_stats(JobFilter())

        assert len(snapshot.recent_jobs) == 10
        created = [job.created_at for job in snapshot.recent_jobs]
        assert created == sorted(created, reverse=True)

    @pytest.mark.asyncio
    async def test_strict_extraction_skips_other_shapes(self, seed, stats_service, job_factory) -> None:
        await seed(jobs=[
            job_factory(status="success", result='{"latitude": 1, "longitude": 2}'),
            job_factory(status="success", result='{"data": {"latitude": "x", "longitude": 2}}'),
            job_factory(status="completed", result='{"data": {"latitude": 0, "longitude": 0}}'),
        ])

        snapshot = await stats_service.get_stats(JobFilter())

        assert [(loc.lat, loc.lng) for loc in snapshot.locations] == [(0.0, 0.0)]

    @pytest.mark.asyncio
    async def test_average_duration(self, seed, stats_service, job_factory, now) -> None:
        created = now - timedelta(hours=1)
        await seed(jobs=[
            job_factory(status="success", created_at=created, updated_at=created + timedelta(seconds=30)),
            job_factory(status="failed", created_at=created, updated_at=created + timedelta(seconds=90)),
        ])

        snapshot = await stats_service.get_stats(JobFilter())

        assert snapshot.avg_time == pytest.approx(30.0, abs=1e-2)

    @pytest.mark.asyncio
    async def test_store_failure_returns_nothing(self, seed, stats_service, job_factory) -> None:
        await seed(jobs=[job_factory()])
        failing = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("connection lost")))

        with patch.object(job_crud, "get_status_counts", failing):
            with pytest.raises(StoreError) as exc_info:
                await stats_service.get_stats(JobFilter())

        assert exc_info.value.details["operation"] == "stats"

    @pytest.mark.asyncio
    async def test_unreachable_store_returns_nothing(self, seed, stats_service) -> None:
        refused = AsyncMock(side_effect=ConnectionRefusedError(111, "Connect call failed"))

        with patch.object(job_crud, "get_recent", refused):
            with pytest.raises(StoreError) as exc_info:
                await stats_service.get_stats(JobFilter())

        assert exc_info.value.details["error_type"] == "ConnectionRefusedError"

    @pytest.mark.asyncio
    async def test_failure_cancels_sibling_queries(self, seed, stats_service) -> None:
        started = asyncio.Event()
        release = asyncio.Event()
        cancelled = []

        async def blocking_summary(session, job_filter, today_start):
            started.set()
            try:
                await release.wait()
            except asyncio.CancelledError:
                cancelled.append("summary")
                raise

        async def failing_status_counts(session, job_filter):
            await started.wait()
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        with patch.object(job_crud, "get_summary", blocking_summary), \
                patch.object(job_crud, "get_status_counts", failing_status_counts):
            with pytest.raises(StoreError):
                await stats_service.get_stats(JobFilter())

        assert cancelled == ["summary"]
        assert not release.is_set()


class TestGroupStatusCounts:
    """Test suite for group_status_counts()."""

    def test_no_data_family_is_merged(self) -> None:
        rows = [("not_found", 2), ("number_off", 1), ("unknown", 4), ("success", 3)]

        grouped = group_status_counts(rows)

        assert [(c.status, c.count) for c in grouped] == [("no_data", 7), ("success", 3)]

    def test_success_and_completed_stay_separate(self) -> None:
        grouped = group_status_counts([("success", 1), ("completed", 1)])

        assert {c.status for c in grouped} == {"success", "completed"}

    def test_missing_status_is_labelled_unknown(self) -> None:
        grouped = group_status_counts([(None, 2), ("queued", 2)])

        assert [(c.status, c.count) for c in grouped] == [("Unknown", 2), ("queued", 2)]
