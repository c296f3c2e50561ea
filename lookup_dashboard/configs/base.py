"""
Shared settings base for the lookup dashboard.

Every settings class reads the process environment and an optional ``.env``
file; unknown variables are ignored so the dashboard can share an env file
with the lookup worker that writes the jobs table.

Dependencies: pydantic, pydantic_settings
System role: Foundation for dashboard configuration classes
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BaseSettings(PydanticBaseSettings):
    """Base configuration: deployment name and log verbosity."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name reported in the startup log",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Root log level for the dashboard process",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
