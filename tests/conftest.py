"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite-backed jobs store (writable seeding engine plus the
read-only engine the application uses), job row builders, a fixed clock.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from lookup_dashboard.boundary.db.base import Base
from lookup_dashboard.boundary.db.connection import (
    create_read_only_engine,
    get_async_session_factory,
)
from lookup_dashboard.boundary.db.models import JobModel, LogModel
from lookup_dashboard.configs.dashboard import DashboardSettings

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed 'current time' used by clocks in tests."""
    return NOW


@pytest.fixture
def dashboard_settings() -> DashboardSettings:
    """Dashboard limits with their default values."""
    return DashboardSettings()


@pytest.fixture
def job_factory():
    """
    Build job row dicts with sensible defaults.

    Returns:
        Callable[..., dict]: Builder accepting column overrides
    """

    def _build(**overrides) -> dict:
        created_at = overrides.pop("created_at", NOW - timedelta(hours=3))
        row = {
            "id": str(uuid.uuid4()),
            "username": "trg_user",
            "phone": "628100000001",
            "status": "success",
            "result": None,
            "created_at": created_at,
            "updated_at": created_at + timedelta(seconds=5),
        }
        row.update(overrides)
        return row

    return _build


@pytest.fixture
def database_url(tmp_path) -> str:
    """File-backed SQLite URL so concurrent sessions see the same data."""
    return f"sqlite+aiosqlite:///{tmp_path / 'jobs.db'}"


@pytest.fixture
async def seed(database_url):
    """
    Create the schema and provide an inserter for jobs and logs.

    Yields:
        Callable: async seed(jobs=[...], logs=[...])
    """
    engine = create_async_engine(database_url, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async def _seed(jobs=(), logs=()) -> None:
        async with engine.begin() as conn:
            if jobs:
                await conn.execute(insert(JobModel), list(jobs))
            if logs:
                await conn.execute(insert(LogModel), list(logs))

    yield _seed

    await engine.dispose()


@pytest.fixture
async def read_only_engine(database_url, seed):
    """The application's read-only engine over the seeded database."""
    engine = create_read_only_engine(database_url, poolclass=NullPool)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(read_only_engine):
    """Session factory bound to the read-only engine."""
    return get_async_session_factory(read_only_engine)


@pytest.fixture
async def db(session_factory):
    """A single read-only session."""
    async with session_factory() as session:
        yield session
