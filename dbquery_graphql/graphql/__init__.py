"""GraphQL result-set types built with Strawberry.

This module provides:
- ``QueryTypeMapper``: synthesizes ``DB_QUERY_<Element>`` types on demand
- ``TypeRegistry``: named types and reverse name lookup
- ``build_schema``: schema assembly with error logging and masking
"""

from __future__ import annotations

from dbquery_graphql.graphql.factory import FactoryContext, QueryTypeMapperFactory
from dbquery_graphql.graphql.mapper import QueryTypeMapper
from dbquery_graphql.graphql.naming import META_TYPE_NAME, QUERY_TYPE_PREFIX
from dbquery_graphql.graphql.registry import TypeMapper, TypeRegistry
from dbquery_graphql.graphql.schema import DbQuerySchema, build_schema
from dbquery_graphql.graphql.types import DbMeta

__all__ = [
    "META_TYPE_NAME",
    "QUERY_TYPE_PREFIX",
    "DbMeta",
    "DbQuerySchema",
    "FactoryContext",
    "QueryTypeMapper",
    "QueryTypeMapperFactory",
    "TypeMapper",
    "TypeRegistry",
    "build_schema",
]
