"""
Exception handlers.

Maps domain exceptions onto HTTP status codes with one error body shape
(``ErrorResponse``) and logs each failure with its context.

Dependencies: fastapi, lookup_dashboard.core.exceptions, lookup_dashboard.models.common
System role: Request-boundary error reporting
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lookup_dashboard.core.exceptions import (
    DashboardException,
    InvalidFilterError,
    JobNotFoundError,
    StoreError,
)
from lookup_dashboard.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, details: dict | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details or None)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def handle_invalid_filter(request: Request, exc: InvalidFilterError) -> JSONResponse:
    logger.warning("Invalid filter", extra={"path": request.url.path, "error": exc.message})
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.details)


async def handle_job_not_found(request: Request, exc: JobNotFoundError) -> JSONResponse:
    logger.warning("Job not found", extra={"path": request.url.path, "error": exc.message})
    return _error_response(status.HTTP_404_NOT_FOUND, exc.message, exc.details)


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(
        "Store failure reported to client",
        extra={"path": request.url.path, "error": exc.message},
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message, exc.details)


async def handle_dashboard_error(request: Request, exc: DashboardException) -> JSONResponse:
    logger.error("Unhandled dashboard error", extra={"path": request.url.path, "error": exc.message})
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message, exc.details)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Request validation failed", extra={"path": request.url.path})
    return _error_response(
        422,
        "Invalid request parameters",
        {"errors": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the dashboard's exception handlers to an application."""
    app.add_exception_handler(InvalidFilterError, handle_invalid_filter)
    app.add_exception_handler(JobNotFoundError, handle_job_not_found)
    app.add_exception_handler(StoreError, handle_store_error)
    app.add_exception_handler(DashboardException, handle_dashboard_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
