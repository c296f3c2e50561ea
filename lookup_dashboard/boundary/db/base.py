"""
SQLAlchemy declarative base.

The jobs and logs tables are owned by the lookup worker; models here only
mirror the columns this service reads.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata (used by tests to build a schema).
    """

    pass
