"""
Observability module.

Provides logging configuration, correlation ID tracking and request logging.
"""

from lookup_dashboard.observability.logger import configure_logging

__all__ = ["configure_logging"]
