"""
Filter criteria shared by every aggregate query.

All calendar boundaries are evaluated in UTC: ``start_date`` is inclusive from
00:00 UTC, ``end_date`` is exclusive at 00:00 UTC of the following day.

Dependencies: datetime (stdlib)
System role: Job filter criteria and day boundaries
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from lookup_dashboard.core.exceptions import InvalidFilterError

ALL_USERS = "all"


def start_of_day(moment: datetime) -> datetime:
    """Midnight UTC of the day containing ``moment`` (naive values are taken as UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return datetime.combine(moment.date(), time.min, tzinfo=timezone.utc)


@dataclass(frozen=True)
class JobFilter:
    """
    User and date-range predicate applied uniformly to one request.

    Attributes:
        username: Exact owner match, or None for all users
        start_date: Inclusive first calendar day, or None
        end_date: Inclusive last calendar day, or None
    """

    username: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    @classmethod
    def build(
        cls,
        username: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        all_users_sentinel: str = ALL_USERS,
    ) -> "JobFilter":
        """
        Normalize raw request input into a filter.

        An empty username or the "all" sentinel disables the user predicate.

        Raises:
            InvalidFilterError: If start_date falls after end_date
        """
        if not username or username == all_users_sentinel:
            username = None
        if start_date and end_date and start_date > end_date:
            raise InvalidFilterError(
                "startDate must not be after endDate",
                field="startDate",
                details={"startDate": start_date.isoformat(), "endDate": end_date.isoformat()},
            )
        return cls(username=username, start_date=start_date, end_date=end_date)

    @property
    def created_from(self) -> datetime | None:
        """Inclusive lower bound on created_at."""
        if self.start_date is None:
            return None
        return datetime.combine(self.start_date, time.min, tzinfo=timezone.utc)

    @property
    def created_before(self) -> datetime | None:
        """Exclusive upper bound on created_at."""
        if self.end_date is None:
            return None
        return datetime.combine(self.end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
