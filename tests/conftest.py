"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: environment defaults and settings instances
    - Database Fixtures: in-memory SQLite session seeded with users
    - Type Mapping Fixtures: registry, factory context and mapper
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from dbquery_graphql.core.settings import DbQuerySettings, clear_settings_cache
from dbquery_graphql.graphql.factory import FactoryContext, QueryTypeMapperFactory
from dbquery_graphql.graphql.registry import TypeRegistry
from tests.fixtures import USERS, Base, Color, TagInput, TagType, User, UserType

if TYPE_CHECKING:
    from collections.abc import Iterator

    from dbquery_graphql.graphql.mapper import QueryTypeMapper

# Keep tests independent from any local .env
os.environ.setdefault("DBQUERY_ENVIRONMENT", "test")


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> DbQuerySettings:
    return DbQuerySettings(environment="test")


@pytest.fixture
def production_settings() -> DbQuerySettings:
    return DbQuerySettings(environment="production")


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
def session() -> Iterator[Session]:
    """Create an in-memory SQLite session seeded with USERS."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as db_session:
        db_session.add_all(User(**row) for row in USERS)
        db_session.commit()
        yield db_session
    engine.dispose()


# ============================================================================
# Type Mapping Fixtures
# ============================================================================


@pytest.fixture
def registry() -> TypeRegistry:
    return TypeRegistry([UserType, TagType, TagInput, Color])


@pytest.fixture
def context(registry: TypeRegistry, settings: DbQuerySettings) -> FactoryContext:
    return FactoryContext(registry=registry, settings=settings)


@pytest.fixture
def mapper(context: FactoryContext) -> QueryTypeMapper:
    return QueryTypeMapperFactory().create(context)
