"""
Read operations for database models.

Exports the base class and model-specific implementations with
pre-instantiated singletons for direct use.

Usage:
    from lookup_dashboard.boundary.db.CRUD import job_crud

    jobs = await job_crud.list_jobs(db, phone="628123456789")
"""

from lookup_dashboard.boundary.db.CRUD.base_crud import BaseCRUD
from lookup_dashboard.boundary.db.CRUD.job_crud import (
    JobCRUD,
    JobSummary,
    LocationCandidate,
    PhoneCount,
    job_crud,
)
from lookup_dashboard.boundary.db.CRUD.log_crud import LogCRUD, log_crud

__all__ = [
    "BaseCRUD",
    "JobCRUD",
    "JobSummary",
    "LocationCandidate",
    "PhoneCount",
    "job_crud",
    "LogCRUD",
    "log_crud",
]
