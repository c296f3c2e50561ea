"""
FastAPI application with assembled routers.

Initializes the app, owns the database engine for the process lifetime and
configures the uvicorn server.

Dependencies: fastapi, uvicorn, lookup_dashboard.api.routers, lookup_dashboard.boundary.db
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lookup_dashboard.api.error_handlers import register_exception_handlers
from lookup_dashboard.boundary.db.connection import get_async_engine, get_async_session_factory
from lookup_dashboard.configs import get_settings
from lookup_dashboard.observability.logger import configure_logging
from lookup_dashboard.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import (
    health_router,
    jobs_router,
    numbers_router,
    overview_router,
    stats_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Creates the read-only engine and session factory at startup and disposes
    the connection pool at shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    engine = get_async_engine(settings.database)
    app.state.engine = engine
    app.state.session_factory = get_async_session_factory(engine)
    logger.info(
        "Application startup complete: database engine ready",
        extra={"environment": settings.environment},
    )

    yield

    await engine.dispose()
    logger.info("Application shutdown: database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Lookup Dashboard API",
        description="Read-only monitoring of phone-lookup jobs",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(stats_router, prefix="/api/v1")
    app.include_router(numbers_router, prefix="/api/v1")
    app.include_router(jobs_router, prefix="/api/v1")
    app.include_router(overview_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "lookup_dashboard.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
