"""Tests for schemas containing synthesized result-set types."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.printer import print_schema

from dbquery_graphql.graphql.schema import DbQuerySchema, build_schema, get_extensions
from tests.graphql.conftest import build_query_root

pytestmark = pytest.mark.integration

if TYPE_CHECKING:
    from dbquery_graphql.core.settings import DbQuerySettings
    from dbquery_graphql.graphql.mapper import QueryTypeMapper


def test_schema_is_db_query_schema(schema: DbQuerySchema) -> None:
    assert isinstance(schema, DbQuerySchema)
    assert isinstance(schema, strawberry.Schema)


def test_schema_contains_result_set_types(schema: DbQuerySchema) -> None:
    """Test that the SDL shows result-set and meta types."""
    sdl = print_schema(schema)
    assert "type DB_QUERY_User" in sdl
    assert "type DB_QUERY_Tag" in sdl
    assert "type DB_META" in sdl


def test_result_set_fields(schema: DbQuerySchema) -> None:
    sdl = print_schema(schema)
    assert "[User!]!" in sdl
    assert "[Tag!]!" in sdl
    assert "meta: DB_META!" in sdl
    assert "limit: Int" in sdl
    assert "offset: Int" in sdl


def test_meta_fields(schema: DbQuerySchema) -> None:
    sdl = print_schema(schema)
    assert "class: String" in sdl
    assert "total: Int" in sdl
    assert "key: String" in sdl


def test_result_set_reused_across_fields(schema: DbQuerySchema) -> None:
    """users and activeUsers share one DB_QUERY_User type."""
    sdl = print_schema(schema)
    assert sdl.count("type DB_QUERY_User ") == 1
    assert "users: DB_QUERY_User!" in sdl
    assert "activeUsers: DB_QUERY_User!" in sdl


def test_type_reached_only_by_name(
    mapper: QueryTypeMapper,
    settings: DbQuerySettings,
) -> None:
    """Result sets mapped by name can be added to a schema explicitly."""
    color_query = mapper.map_name_to_type("DB_QUERY_Color")
    schema = build_schema(build_query_root(mapper), types=[color_query], settings=settings)

    sdl = print_schema(schema)
    assert "type DB_QUERY_Color" in sdl
    assert "[Color!]!" in sdl


def test_masking_extension_follows_settings(
    settings: DbQuerySettings,
    production_settings: DbQuerySettings,
) -> None:
    assert get_extensions(settings) == []
    (extension_factory,) = get_extensions(production_settings)
    assert not isinstance(extension_factory, MaskErrors)

    extension = extension_factory()
    assert isinstance(extension, MaskErrors)
    assert extension.error_message == production_settings.masked_error_message
    assert extension_factory() is not extension


def test_process_errors_logs_every_error(schema: DbQuerySchema) -> None:
    errors = [GraphQLError("first"), GraphQLError("second")]
    with patch("dbquery_graphql.graphql.schema.log_error") as log_error:
        schema.process_errors(errors)

    assert [call.args[0] for call in log_error.call_args_list] == errors
