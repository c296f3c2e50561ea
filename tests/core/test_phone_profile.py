"""
Test suite for build_phone_activity().

System role: Verification of the per-phone drill-down
"""

from datetime import datetime, timezone
from types import SimpleNamespace

from lookup_dashboard.core.phone_profile import build_phone_activity

CREATED = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


def make_job(job_id: str, status: str | None, result: str | None = None) -> SimpleNamespace:
    return SimpleNamespace(id=job_id, status=status, result=result, created_at=CREATED)


def test_counts_success_failed_and_other() -> None:
    jobs = [
        make_job("1", "success"),
        make_job("2", "completed"),
        make_job("3", "failed"),
        make_job("4", "not_found"),
        make_job("5", None),
    ]

    activity = build_phone_activity("628100000001", jobs)

    assert activity.total == 5
    assert activity.success == 2
    assert activity.failed == 1
    assert activity.other == 2


def test_chart_data_omits_empty_buckets() -> None:
    activity = build_phone_activity("628100000001", [make_job("1", "success"), make_job("2", "queued")])

    assert activity.chart_data == [{"name": "Success", "value": 1}, {"name": "Other", "value": 1}]


def test_locations_use_tolerant_extraction_and_carry_job_id() -> None:
    jobs = [
        make_job("a", "success", '{"location":{"lat":10,"long":20}}'),
        make_job("b", "failed", '{"lat":3,"lng":4}'),
        make_job("c", "success", "not json"),
        make_job("d", "success", None),
    ]

    activity = build_phone_activity("628100000001", jobs)

    assert [(p.job_id, p.lat, p.lng) for p in activity.locations] == [("a", 10.0, 20.0), ("b", 3.0, 4.0)]
    assert all(p.phone == "628100000001" for p in activity.locations)
    assert activity.locations[0].created_at == CREATED


def test_empty_history() -> None:
    activity = build_phone_activity("628100000001", [])

    assert activity.total == 0
    assert activity.chart_data == []
    assert activity.locations == []
