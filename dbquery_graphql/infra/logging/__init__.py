"""Logging infrastructure.

Basic usage:
    import logging

    from dbquery_graphql.infra.logging import get_lazy_logger, setup_logging

    setup_logging()
    logger = logging.getLogger(__name__)
    lazy_logger = get_lazy_logger(__name__)
    lazy_logger.debug(lambda: f"Expensive: {compute()}")  # Only runs if DEBUG enabled
"""

from dbquery_graphql.infra.logging.config import (
    build_logging_config,
    is_logging_initialized,
    setup_logging,
)
from dbquery_graphql.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "LazyLoggerAdapter",
    "build_logging_config",
    "get_lazy_logger",
    "is_logging_initialized",
    "setup_logging",
]
