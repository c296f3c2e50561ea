"""
Translation of driver and ORM failures into StoreError.

Dependencies: sqlalchemy, lookup_dashboard.core.exceptions
System role: Store failure boundary
"""

import asyncio
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from lookup_dashboard.core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """
    Re-raise store failures raised in the block as StoreError.

    Covers SQLAlchemy errors and the driver-level connection failures
    (refused or reset sockets, connect timeouts) that reach us unwrapped.

    Args:
        operation: Name of the read operation, reported in the error details

    Usage:
        with translate_store_errors("numbers"):
            rows = await job_crud.get_phone_counts(db, job_filter, limit=20)
    """
    try:
        yield
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
        logger.exception(
            "Database query failed",
            extra={"operation": operation, "error_type": type(e).__name__},
        )
        raise StoreError(
            f"Database query failed while loading {operation}",
            operation=operation,
            details={"error_type": type(e).__name__},
        ) from e
