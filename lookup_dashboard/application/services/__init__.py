"""Service orchestrators."""

from .job_service import JobService
from .overview_service import OverviewService
from .stats_service import StatsService

__all__ = [
    "JobService",
    "OverviewService",
    "StatsService",
]
