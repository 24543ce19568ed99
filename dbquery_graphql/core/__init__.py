"""Core exceptions and settings."""

from __future__ import annotations

from .exceptions import CannotMapTypeError, DbQueryError, MissingParameterError
from .settings import DbQuerySettings, clear_settings_cache, get_settings

__all__ = [
    "CannotMapTypeError",
    "DbQueryError",
    "DbQuerySettings",
    "MissingParameterError",
    "clear_settings_cache",
    "get_settings",
]
