"""
Dependency injection container.

Factory functions for FastAPI dependencies. The session factory lives on
``app.state`` and is created and disposed by the application lifespan.

Dependencies: fastapi, lookup_dashboard.configs, lookup_dashboard.application
System role: DI container for service injection
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lookup_dashboard.application.services import (
    JobService,
    OverviewService,
    StatsService,
)
from lookup_dashboard.configs import get_settings
from lookup_dashboard.configs.dashboard import DashboardSettings


def get_dashboard_settings() -> DashboardSettings:
    """Get dashboard limits from the settings singleton."""
    return get_settings().dashboard


def get_session_factory(request: Request) -> async_sessionmaker:
    """
    Get the application's session factory.

    Args:
        request: Current request (gives access to app.state)

    Returns:
        async_sessionmaker: Factory bound to the read-only engine
    """
    return request.app.state.session_factory


async def get_async_db(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped async session, closed after the route completes.

    Yields:
        AsyncSession: Read-only session
    """
    async with session_factory() as session:
        yield session


def get_stats_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    settings: DashboardSettings = Depends(get_dashboard_settings),
) -> StatsService:
    """
    Get stats service instance.

    Takes the session factory rather than a session: the snapshot's queries
    each run on their own session, concurrently.

    Returns:
        StatsService: Stats service instance
    """
    return StatsService(session_factory=session_factory, settings=settings)


def get_job_service(
    db: AsyncSession = Depends(get_async_db),
    settings: DashboardSettings = Depends(get_dashboard_settings),
) -> JobService:
    """
    Get job service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Dashboard limits

    Returns:
        JobService: Job service instance
    """
    return JobService(db=db, settings=settings)


def get_overview_service(
    db: AsyncSession = Depends(get_async_db),
    settings: DashboardSettings = Depends(get_dashboard_settings),
) -> OverviewService:
    """
    Get overview service instance.

    Returns:
        OverviewService: Overview service instance
    """
    return OverviewService(db=db, settings=settings)
