"""On-demand GraphQL result-set types for paginated, countable queries."""

from __future__ import annotations

from dbquery_graphql.core.exceptions import (
    CannotMapTypeError,
    DbQueryError,
    MissingParameterError,
)
from dbquery_graphql.graphql import (
    DbMeta,
    FactoryContext,
    QueryTypeMapper,
    QueryTypeMapperFactory,
    TypeRegistry,
    build_schema,
)
from dbquery_graphql.query import ListQuery, QueryResult, SelectQuery

__all__ = [
    "CannotMapTypeError",
    "DbMeta",
    "DbQueryError",
    "FactoryContext",
    "ListQuery",
    "MissingParameterError",
    "QueryResult",
    "QueryTypeMapper",
    "QueryTypeMapperFactory",
    "SelectQuery",
    "TypeRegistry",
    "build_schema",
]
