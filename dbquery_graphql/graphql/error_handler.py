"""GraphQL error handling and production error masking.

Errors raised by result-set resolvers reach the client as GraphQL errors.
Client-safe errors (``MissingParameterError``) keep their message and carry
their category in ``extensions``; everything else is logged with its stack
trace and, when masking is on, replaced by a generic message through
Strawberry's ``MaskErrors`` extension using ``should_mask_error``.

Usage:
    schema = build_schema(Query)  # wires MaskErrors and process_errors
"""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING, Any

from graphql import GraphQLError

from dbquery_graphql.core.exceptions import DbQueryError

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCategory",
    "error_category",
    "is_client_safe_error",
    "log_error",
    "should_mask_error",
]


class ErrorCategory:
    """Error categories for classification."""

    DB_QUERY = "db_query"
    TYPE_MAPPING = "type_mapping"
    GRAPHQL = "graphql"
    INTERNAL = "internal"


# ============================================================================
# Error Classification
# ============================================================================


def is_client_safe_error(error: GraphQLError) -> bool:
    """Determine if an error may be shown to the client as-is.

    Client-safe errors are:
    - errors raised by the GraphQL engine itself (parsing, validation,
      argument coercion), which have no original exception
    - package exceptions flagged ``is_client_safe``

    Args:
        error: GraphQL error to check

    Returns:
        True if the message is safe to show, False if it should be masked
    """
    original = error.original_error
    if original is None:
        return True
    if isinstance(original, GraphQLError):
        return is_client_safe_error(original)
    return bool(getattr(original, "is_client_safe", False))


def error_category(error: GraphQLError) -> str:
    original = error.original_error
    if original is None:
        return ErrorCategory.GRAPHQL
    if isinstance(original, DbQueryError):
        return original.category
    return ErrorCategory.INTERNAL


def should_mask_error(error: GraphQLError) -> bool:
    """Predicate for Strawberry's ``MaskErrors`` extension."""
    return not is_client_safe_error(error)


# ============================================================================
# Error Logging
# ============================================================================


def log_error(error: GraphQLError, execution_context: ExecutionContext | None = None) -> None:
    """Log error with full details for server-side debugging.

    Args:
        error: GraphQL error to log
        execution_context: Execution context with operation info
    """
    log_context: dict[str, Any] = {
        "error_message": error.message,
        "error_path": error.path,
        "error_category": error_category(error),
    }

    if execution_context is not None and execution_context.operation_name:
        log_context["operation_name"] = execution_context.operation_name

    client_safe = is_client_safe_error(error)
    original = error.original_error
    if original is not None:
        log_context["exception_type"] = type(original).__name__
        if not client_safe:
            log_context["stack_trace"] = "".join(
                traceback.format_exception(type(original), original, original.__traceback__)
            )

    if client_safe:
        logger.info("GraphQL client error: %s", error.message, extra=log_context)
    else:
        logger.error("GraphQL internal error: %s", error.message, extra=log_context)
