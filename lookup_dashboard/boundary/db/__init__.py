"""
Database boundary layer: read models, read-only CRUD and connection management.

Exports:
  - Base: declarative base
  - create_read_only_engine(), get_async_engine(), get_async_session_factory()
  - JobModel, LogModel: read models for externally owned tables
  - job_crud, log_crud: read operation singletons

Dependencies: sqlalchemy, lookup_dashboard.configs
System role: Read-only adapter over the jobs database
"""

from lookup_dashboard.boundary.db.base import Base
from lookup_dashboard.boundary.db.connection import (
    create_read_only_engine,
    get_async_engine,
    get_async_session_factory,
)
from lookup_dashboard.boundary.db.models import JobModel, LogModel
from lookup_dashboard.boundary.db.CRUD import (
    BaseCRUD,
    JobCRUD,
    LogCRUD,
    job_crud,
    log_crud,
)

__all__ = [
    "Base",
    "create_read_only_engine",
    "get_async_engine",
    "get_async_session_factory",
    "JobModel",
    "LogModel",
    "BaseCRUD",
    "JobCRUD",
    "LogCRUD",
    "job_crud",
    "log_crud",
]
