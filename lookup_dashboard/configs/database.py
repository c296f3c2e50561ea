"""
Database configuration settings.

Manages PostgreSQL connection parameters for the read-only jobs store.
A complete URL in DASHBOARD_DB_URL takes precedence over discrete fields.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the async engine
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from lookup_dashboard.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DASHBOARD_DB_URL", "POSTGRES_URL"),
        description="Full connection URL; overrides host/port/user/password/db",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="cp_location", description="PostgreSQL database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
    statement_timeout_ms: int = Field(
        default=30000,
        ge=0,
        description="Server-side statement timeout applied to every connection (0 disables)",
    )

    sslmode: str = Field(default="prefer", description="SSL mode (disable, prefer, require)")

    @property
    def async_database_url(self) -> str:
        """
        Construct async PostgreSQL connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL (asyncpg uses 'ssl' param)
        """
        if self.url:
            scheme, sep, rest = self.url.partition("://")
            if scheme in ("postgres", "postgresql", "postgresql+psycopg2", "postgresql+psycopg"):
                return f"postgresql+asyncpg{sep}{rest}"
            return self.url

        ssl_param = "" if self.sslmode == "disable" else f"?ssl={self.sslmode}"
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}{ssl_param}"
        )
