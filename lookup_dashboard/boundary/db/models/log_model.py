"""
Worker log ORM model.

Mirrors the externally owned ``logs`` table. The table has no column this
service treats as a key, so the mapper key is (job_id, created_at, type) and
reads select columns rather than entities.

Dependencies: sqlalchemy, lookup_dashboard.boundary.db.base
System role: Read model for worker log entries
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lookup_dashboard.boundary.db.base import Base


class LogModel(Base):
    """Log line emitted by the lookup worker while processing a job."""

    __tablename__ = "logs"

    job_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    type: Mapped[str] = mapped_column(String(32), primary_key=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), primary_key=True)
