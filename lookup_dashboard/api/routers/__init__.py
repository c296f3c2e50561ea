"""API routers."""

from .health import router as health_router
from .jobs import router as jobs_router
from .numbers import router as numbers_router
from .overview import router as overview_router
from .stats import router as stats_router

__all__ = [
    "health_router",
    "jobs_router",
    "numbers_router",
    "overview_router",
    "stats_router",
]
