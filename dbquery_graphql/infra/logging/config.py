"""Logging configuration setup.

Configures the root logger once through dictConfig; module loggers
propagate to it.
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dbquery_graphql.core.settings import DbQuerySettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False


def build_logging_config(settings: DbQuerySettings) -> dict[str, Any]:
    """Build a dictConfig mapping from settings.

    Args:
        settings: Settings providing level and format.

    Returns:
        Dictionary accepted by logging.config.dictConfig.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": settings.log_format},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": settings.log_level,
            "handlers": ["console"],
        },
    }


def setup_logging(settings: DbQuerySettings | None = None, *, force: bool = False) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        settings: Optional settings instance. If omitted, settings are
            loaded via get_settings().
        force: Reconfigure logging even if it was already initialized.
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if settings is None:
        from dbquery_graphql.core.settings import get_settings

        settings = get_settings()

    logging.config.dictConfig(build_logging_config(settings))
    _LOGGING_INITIALIZED = True
    logger.debug(
        "Logging configured (level=%s, environment=%s)",
        settings.log_level,
        settings.environment,
    )


def is_logging_initialized() -> bool:
    return _LOGGING_INITIALIZED


__all__ = ["build_logging_config", "is_logging_initialized", "setup_logging"]
