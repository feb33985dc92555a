"""
Environment configuration for pushtrigger.

Loads configuration from environment variables using pydantic-settings.
Variables use the ``PUSHTRIGGER_`` prefix, e.g. ``PUSHTRIGGER_REQUEST_TIMEOUT``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PUSHTRIGGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # HTTP Configuration
    request_timeout: float = Field(
        default=100.0, gt=0, description="Default callback request timeout in seconds"
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text", description="Logging format - text for human-readable, json for structured logs"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Cached so the environment is read once per process.
    """
    return Settings()
