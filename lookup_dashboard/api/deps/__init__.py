"""Dependency injection functions."""

from .dependencies import (
    get_async_db,
    get_dashboard_settings,
    get_job_service,
    get_overview_service,
    get_session_factory,
    get_stats_service,
)

__all__ = [
    "get_async_db",
    "get_dashboard_settings",
    "get_job_service",
    "get_overview_service",
    "get_session_factory",
    "get_stats_service",
]
