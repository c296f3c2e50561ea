"""
Stats snapshot schema.

Dependencies: pydantic, lookup_dashboard.models.job
System role: Stats API contract
"""

from pydantic import BaseModel, Field

from lookup_dashboard.models.job import JobRecord, LocationResponse


class StatusCount(BaseModel):
    status: str
    count: int


class StatsSnapshotResponse(BaseModel):
    """
    Aggregated view of the filtered job set.

    ``users`` always lists every known username regardless of the filter.
    """

    total_req: int = Field(description="Jobs matching the filter")
    today_req: int = Field(description="Matching jobs created since 00:00 UTC today")
    total_numbers: int = Field(description="Distinct phones among matching jobs")
    avg_time: float = Field(description="Mean completion time of successful jobs, seconds")
    status_counts: list[StatusCount]
    recent_jobs: list[JobRecord]
    locations: list[LocationResponse]
    users: list[str]
