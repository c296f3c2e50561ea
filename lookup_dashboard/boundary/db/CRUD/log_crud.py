"""
Worker log read operations.

Dependencies: sqlalchemy, lookup_dashboard.boundary.db.models.log_model
System role: Log listing and freshness for the overview
"""

from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lookup_dashboard.boundary.db.models.log_model import LogModel


class LogCRUD:
    """Read operations for LogModel; rows are returned as plain dicts."""

    async def get_last_created_at(self, session: AsyncSession) -> datetime | None:
        """Timestamp of the newest log entry, or None if the table is empty."""
        result = await session.execute(select(func.max(LogModel.created_at)))
        return result.scalar_one_or_none()

    async def get_recent(
        self,
        session: AsyncSession,
        log_type: str | None,
        limit: int,
    ) -> list[dict[str, Any]]:
        """
        Retrieve the newest log entries.

        Args:
            session: Async database session
            log_type: Exact type match (e.g. "error"), or None for all types
            limit: Maximum number of entries

        Returns:
            list of dicts with job_id, type, message, created_at
        """
        stmt = select(LogModel.job_id, LogModel.type, LogModel.message, LogModel.created_at)
        if log_type is not None:
            stmt = stmt.where(LogModel.type == log_type)
        stmt = stmt.order_by(LogModel.created_at.desc()).limit(limit)
        result = await session.execute(stmt)
        return [dict(row._mapping) for row in result.all()]


log_crud = LogCRUD()
