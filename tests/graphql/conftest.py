"""GraphQL test fixtures.

Provides:
- Root query types built around synthesized result-set types
- Schemas in test and production settings
- Query documents shared by the tests

Root types reference classes created at runtime, so annotations in this
module are evaluated eagerly.
"""

from typing import Any

import pytest
import strawberry
from sqlalchemy.orm import Session
from strawberry.types import Info

from dbquery_graphql.core.settings import DbQuerySettings
from dbquery_graphql.graphql.mapper import QueryTypeMapper
from dbquery_graphql.graphql.schema import DbQuerySchema, build_schema
from dbquery_graphql.query import ListQuery, QueryResult, SelectQuery
from tests.fixtures import TagType, User, UserType

TAGS = [TagType(label=label) for label in ("alpha", "beta", "gamma")]


def build_query_root(mapper: QueryTypeMapper) -> type:
    """Create a root Query type exposing users and tags as result sets."""
    UserQuery = mapper.map_class_to_type(QueryResult, UserType)
    TagQuery = mapper.map_class_to_type(QueryResult, TagType | None)

    @strawberry.type
    class Query:
        @strawberry.field
        def users(self, info: Info) -> UserQuery:
            return SelectQuery(info.context["session"], User).order_by(User.id)

        @strawberry.field
        def active_users(self, info: Info) -> UserQuery:
            return (
                SelectQuery(info.context["session"], User)
                .where(User.is_active.is_(True))
                .order_by(User.id)
            )

        @strawberry.field
        def tags(self) -> TagQuery:
            return ListQuery(TAGS)

        @strawberry.field
        def broken(self) -> UserQuery:
            raise RuntimeError("connection refused by db-primary:5432")

    return Query


@pytest.fixture
def schema(mapper: QueryTypeMapper, settings: DbQuerySettings) -> DbQuerySchema:
    return build_schema(build_query_root(mapper), settings=settings)


@pytest.fixture
def production_schema(
    mapper: QueryTypeMapper,
    production_settings: DbQuerySettings,
) -> DbQuerySchema:
    return build_schema(build_query_root(mapper), settings=production_settings)


@pytest.fixture
def graphql_context(session: Session) -> dict[str, Any]:
    return {"session": session}


USERS_QUERY = """
    query Users($limit: Int, $offset: Int) {
        users {
            data(limit: $limit, offset: $offset) {
                id
                name
            }
            meta {
                total
                key
                name
                class
            }
        }
    }
"""

TAGS_QUERY = """
    query Tags {
        tags {
            data { label }
            meta { total key name class }
        }
    }
"""

BROKEN_QUERY = """
    query Broken {
        broken {
            meta { total }
        }
    }
"""
