"""Query results that synthesized GraphQL types resolve against."""

from __future__ import annotations

from .base import QueryResult
from .inspection import is_persistable_model, model_key
from .select import SelectQuery
from .sequence import ListQuery

__all__ = [
    "ListQuery",
    "QueryResult",
    "SelectQuery",
    "is_persistable_model",
    "model_key",
]
