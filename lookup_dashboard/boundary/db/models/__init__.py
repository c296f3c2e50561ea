"""
Database models package.

Exports:
  - JobModel: phone-lookup job record
  - LogModel: worker log entry

Dependencies: sqlalchemy, lookup_dashboard.boundary.db.base
System role: Read models for externally owned tables
"""

from lookup_dashboard.boundary.db.models.job_model import JobModel
from lookup_dashboard.boundary.db.models.log_model import LogModel

__all__ = ["JobModel", "LogModel"]
