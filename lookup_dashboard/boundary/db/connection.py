"""
Database connection management.

Builds the single async engine the application owns for its lifetime and the
session factory handed to request scopes. Every pooled connection is put
into read-only mode when it is opened, so no code path can write to the
jobs store.

Dependencies: sqlalchemy, asyncpg, lookup_dashboard.configs
System role: Database connection lifecycle management
"""

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from lookup_dashboard.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


def _enable_sqlite_query_only(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def _set_query_only(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA query_only = ON")
        finally:
            cursor.close()


def create_read_only_engine(
    url: str,
    *,
    statement_timeout_ms: int = 0,
    echo: bool = False,
    **engine_kwargs: Any,
) -> AsyncEngine:
    """
    Create an async engine whose connections refuse writes.

    PostgreSQL (asyncpg) connections start with
    ``default_transaction_read_only=on`` and an optional ``statement_timeout``
    passed as server settings. SQLite connections get ``PRAGMA query_only``.

    Args:
        url: SQLAlchemy async database URL
        statement_timeout_ms: Server-side statement timeout (PostgreSQL, 0 disables)
        echo: Echo SQL statements to logs
        **engine_kwargs: Extra create_async_engine arguments (pool sizing, poolclass)

    Returns:
        AsyncEngine: Engine with read-only connections

    Raises:
        ValueError: If the driver has no read-only enforcement here
    """
    backend = make_url(url).get_backend_name()

    if backend == "postgresql":
        server_settings = {"default_transaction_read_only": "on"}
        if statement_timeout_ms:
            server_settings["statement_timeout"] = str(statement_timeout_ms)
        connect_args = dict(engine_kwargs.pop("connect_args", {}))
        connect_args["server_settings"] = {
            **connect_args.get("server_settings", {}),
            **server_settings,
        }
        engine = create_async_engine(
            url,
            echo=echo,
            connect_args=connect_args,
            pool_pre_ping=True,
            **engine_kwargs,
        )
    elif backend == "sqlite":
        engine = create_async_engine(url, echo=echo, **engine_kwargs)
        _enable_sqlite_query_only(engine)
    else:
        raise ValueError(f"Read-only mode is not supported for database backend '{backend}'")

    logger.info(
        "Read-only database engine created",
        extra={"backend": backend, "statement_timeout_ms": statement_timeout_ms},
    )
    return engine


def get_async_engine(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create the application's async engine from settings.

    Args:
        db_config: Database settings

    Returns:
        AsyncEngine: Pooled read-only engine

    Usage:
        engine = get_async_engine(get_settings().database)
        ...
        await engine.dispose()
    """
    return create_read_only_engine(
        db_config.async_database_url,
        statement_timeout_ms=db_config.statement_timeout_ms,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
    )


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory bound to the given engine.

    Sessions never flush; expire_on_commit is off so loaded rows stay usable
    after the session closes.

    Returns:
        async_sessionmaker: Session factory for request and query scopes

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            rows = await job_crud.get_recent(session, JobFilter(), limit=10)
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
