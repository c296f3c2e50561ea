"""
Job ORM model.

Mirrors the externally owned ``jobs`` table written by the phone-lookup
worker. This service never writes to it.

Dependencies: sqlalchemy, lookup_dashboard.boundary.db.base
System role: Read model for phone-lookup job records
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lookup_dashboard.boundary.db.base import Base


class JobModel(Base):
    """
    Phone-lookup job record.

    Attributes:
        id: Opaque identifier assigned by the producer
        username: Owning user (nullable)
        phone: Subject phone number; grouping key for number profiles
        status: Free-form status string (success, completed, failed, not_found, ...)
        result: JSON-encoded result payload as text; may be null or malformed
        created_at: Creation timestamp; primary ordering key
        updated_at: Last update; used for completion duration
    """

    __tablename__ = "jobs"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    phone: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    result: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
