"""
Dashboard query limits and filter conventions.

Dependencies: pydantic_settings
System role: Bounds for list endpoints and filter sentinels
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lookup_dashboard.configs.base import BaseSettings


class DashboardSettings(BaseSettings):
    """Response-size bounds for the monitoring views."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DASHBOARD_",
        case_sensitive=False,
        extra="ignore",
    )

    recent_jobs_limit: int = Field(default=10, ge=1, description="Jobs listed in the stats snapshot")
    numbers_limit: int = Field(default=20, ge=1, description="Maximum per-number profiles returned")
    jobs_default_limit: int = Field(default=100, ge=1, description="Default page size for /jobs")
    jobs_max_limit: int = Field(default=1000, ge=1, description="Largest accepted /jobs limit")
    logs_default_limit: int = Field(default=100, ge=1, description="Default page size for /logs")
    all_users_sentinel: str = Field(
        default="all",
        description="Username value meaning 'no user filter'",
    )
