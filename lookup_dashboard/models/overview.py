"""
Overview and worker log schemas.

Dependencies: pydantic
System role: Overview API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator


class OverviewResponse(BaseModel):
    total_jobs: int
    last_log_at: datetime | None = None


class LogEntryResponse(BaseModel):
    job_id: str
    type: str
    message: str | None = None
    created_at: datetime

    @field_validator("job_id", mode="before")
    @classmethod
    def _stringify_job_id(cls, value: Any) -> Any:
        return value if isinstance(value, str) else str(value)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    now: datetime | None = None
