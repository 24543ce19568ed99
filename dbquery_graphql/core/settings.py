"""Runtime configuration settings.

Environment variables use the DBQUERY_ prefix.
Example: DBQUERY_ENVIRONMENT=production, DBQUERY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "test", "staging", "production"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DbQuerySettings(BaseSettings):
    """Settings for schema building, error masking and logging."""

    environment: Environment = Field(
        default="development",
        description="Deployment environment; production masks internal errors",
    )

    log_level: LogLevel = Field(
        default="INFO",
        description="Root log level applied by setup_logging()",
    )
    log_format: str = Field(
        default="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        min_length=1,
        description="Format string for the console handler",
    )

    # None means "mask in production only"
    mask_errors: bool | None = Field(
        default=None,
        description="Force internal error masking on or off",
    )
    masked_error_message: str = Field(
        default="An internal error occurred. Please try again later.",
        min_length=1,
        description="Message returned to clients in place of masked errors",
    )

    model_config = SettingsConfigDict(
        env_prefix="DBQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def should_mask_errors(self) -> bool:
        """Check if internal GraphQL errors are hidden from clients."""
        if self.mask_errors is not None:
            return self.mask_errors
        return self.is_production


@lru_cache(maxsize=1)
def get_settings() -> DbQuerySettings:
    """Get cached settings.

    Returns:
        Validated and frozen DbQuerySettings instance.
    """
    return DbQuerySettings()


def clear_settings_cache() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["DbQuerySettings", "clear_settings_cache", "get_settings"]
