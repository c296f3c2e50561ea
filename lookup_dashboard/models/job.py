"""
Job schemas.

Response shapes for job listings, number profiles and the per-phone
drill-down.

Dependencies: pydantic
System role: Job API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobRecord(BaseModel):
    """One job row as listed by the dashboard."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str | None = None
    phone: str
    status: str | None = None
    result: str | None = None
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        # uuid columns come back as UUID objects
        return value if isinstance(value, str) else str(value)


class LocationResponse(BaseModel):
    """A map point extracted from a job's result payload."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    lat: float
    lng: float
    phone: str
    created_at: datetime
    job_id: str | None = Field(default=None, alias="jobId")


class NumberProfileResponse(BaseModel):
    """Per-phone aggregate: job count and most recent activity."""

    model_config = ConfigDict(from_attributes=True)

    phone: str
    total: int
    last_seen: datetime


class ChartBucket(BaseModel):
    name: str
    value: int


class PhoneActivityResponse(BaseModel):
    """Drill-down for a single phone number."""

    phone: str
    total: int
    success: int
    failed: int
    other: int
    chart_data: list[ChartBucket]
    locations: list[LocationResponse]
    jobs: list[JobRecord]
