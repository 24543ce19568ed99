"""GraphQL schema assembly.

Builds a Strawberry schema whose errors go through the package error
handler, with internal errors masked when settings ask for it.

Example:
    context = FactoryContext.for_types([UserType])
    mapper = QueryTypeMapperFactory().create(context)
    UserQuery = mapper.map_class_to_type(QueryResult, UserType)

    @strawberry.type
    class Query:
        @strawberry.field
        def users(self, info: Info) -> UserQuery:
            return SelectQuery(info.context["session"], User)

    schema = build_schema(Query, settings=context.settings)
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Any

import strawberry
from strawberry.extensions import MaskErrors

from dbquery_graphql.core.settings import DbQuerySettings, get_settings
from dbquery_graphql.graphql.error_handler import log_error, should_mask_error

if TYPE_CHECKING:
    from collections.abc import Iterable

    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)


class DbQuerySchema(strawberry.Schema):
    """Strawberry schema that logs errors through the package error handler."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            log_error(error, execution_context)


def get_extensions(settings: DbQuerySettings) -> list[Any]:
    """Schema extensions implied by settings.

    Extensions are given as factories; Strawberry builds a fresh instance
    for every operation.
    """
    extensions: list[Any] = []
    if settings.should_mask_errors:
        extensions.append(
            partial(
                MaskErrors,
                should_mask_error=should_mask_error,
                error_message=settings.masked_error_message,
            )
        )
    return extensions


def build_schema(
    query: type,
    *,
    mutation: type | None = None,
    types: Iterable[type] = (),
    settings: DbQuerySettings | None = None,
    extensions: Iterable[Any] = (),
) -> DbQuerySchema:
    """Create the schema for the given root types.

    Args:
        query: Root query type
        mutation: Optional root mutation type
        types: Extra types to include even if unreachable from the roots,
            e.g. result-set types only exposed by name
        settings: Settings to use (defaults to get_settings())
        extensions: Additional Strawberry extensions

    Returns:
        Configured DbQuerySchema
    """
    settings = settings or get_settings()
    schema = DbQuerySchema(
        query=query,
        mutation=mutation,
        types=list(types),
        extensions=[*get_extensions(settings), *extensions],
    )
    logger.info(
        "GraphQL schema created (environment=%s, masking=%s)",
        settings.environment,
        settings.should_mask_errors,
    )
    return schema


__all__ = ["DbQuerySchema", "build_schema", "get_extensions"]
