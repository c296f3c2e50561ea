"""
Per-phone drill-down derived from a phone's full job history.

Dependencies: lookup_dashboard.core.location_extractor
System role: Per-number profile builder (drill-down half)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Protocol

from lookup_dashboard.core.location_extractor import extract_tolerant
from lookup_dashboard.core.status_groups import FAILED_STATUS, canonical_status


class JobLike(Protocol):
    id: Any
    status: str | None
    result: Any
    created_at: datetime


@dataclass
class LocationPoint:
    lat: float
    lng: float
    phone: str
    created_at: datetime
    job_id: str | None = None


@dataclass
class PhoneActivity:
    """
    Summary of one phone's history.

    ``chart_data`` lists the Success/Failed/Other buckets with zero buckets
    left out, in that order.
    """

    phone: str
    total: int = 0
    success: int = 0
    failed: int = 0
    other: int = 0
    chart_data: list[dict[str, Any]] = field(default_factory=list)
    locations: list[LocationPoint] = field(default_factory=list)


def build_phone_activity(phone: str, jobs: Iterable[JobLike]) -> PhoneActivity:
    """
    Count outcomes and collect map points for one phone.

    Locations use the tolerant extractor, so payloads shaped
    ``{"lat": ..}``, ``{"location": {..}}`` or ``{"data": {..}}`` all count.

    Args:
        phone: Phone number the jobs belong to
        jobs: The phone's jobs, most recent first

    Returns:
        PhoneActivity: Counts, chart buckets and extracted locations
    """
    activity = PhoneActivity(phone=phone)

    for job in jobs:
        activity.total += 1
        outcome = canonical_status(job.status)
        if outcome == "success":
            activity.success += 1
        elif outcome == FAILED_STATUS:
            activity.failed += 1
        else:
            activity.other += 1

        coordinates = extract_tolerant(job.result)
        if coordinates is not None:
            activity.locations.append(
                LocationPoint(
                    lat=coordinates.lat,
                    lng=coordinates.lng,
                    phone=phone,
                    created_at=job.created_at,
                    job_id=str(job.id),
                )
            )

    buckets = (
        ("Success", activity.success),
        ("Failed", activity.failed),
        ("Other", activity.other),
    )
    activity.chart_data = [{"name": name, "value": value} for name, value in buckets if value > 0]
    return activity
