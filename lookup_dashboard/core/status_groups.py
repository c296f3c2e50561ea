"""
Canonical status groups for job records.

The producer writes free-form status strings. Two groupings are in use:

- ``status_group``: what the status distribution chart aggregates by. Only the
  "nothing found" family collapses to ``no_data``; ``success`` and
  ``completed`` keep their own labels.
- ``canonical_status``: the display bucket, which additionally folds
  ``completed`` into ``success``.
"""

SUCCESS_STATUSES: tuple[str, ...] = ("success", "completed")
FAILED_STATUS = "failed"
NO_DATA_STATUSES: tuple[str, ...] = ("not_found", "number_off", "unknown")

NO_DATA_GROUP = "no_data"
UNKNOWN_LABEL = "Unknown"


def is_success(status: str | None) -> bool:
    return status in SUCCESS_STATUSES


def status_group(status: str | None) -> str:
    """Label used by the status distribution; a missing status reads as ``Unknown``."""
    if status is None:
        return UNKNOWN_LABEL
    if status in NO_DATA_STATUSES:
        return NO_DATA_GROUP
    return status


def canonical_status(status: str | None) -> str:
    """Display bucket: success, failed, no_data, or the raw status."""
    if is_success(status):
        return "success"
    return status_group(status)
