"""Factory wiring a ``QueryTypeMapper`` into a schema-build context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dbquery_graphql.core.settings import DbQuerySettings, get_settings
from dbquery_graphql.graphql.mapper import QueryTypeMapper
from dbquery_graphql.graphql.registry import TypeRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any


@dataclass
class FactoryContext:
    """State shared by everything built for one schema.

    Attributes:
        registry: Registry of named types and mappers
        settings: Settings in effect for this build
    """

    registry: TypeRegistry = field(default_factory=TypeRegistry)
    settings: DbQuerySettings = field(default_factory=get_settings)

    @classmethod
    def for_types(cls, types: Iterable[Any], **kwargs: Any) -> FactoryContext:
        """Create a context whose registry holds ``types``."""
        return cls(registry=TypeRegistry(types), **kwargs)


class QueryTypeMapperFactory:
    """Creates one ``QueryTypeMapper`` per context.

    Example:
        context = FactoryContext.for_types([UserType])
        mapper = QueryTypeMapperFactory().create(context)
    """

    def create(self, context: FactoryContext) -> QueryTypeMapper:
        """Create a mapper and register it with the context's registry."""
        mapper = QueryTypeMapper(context)
        context.registry.add_mapper(mapper)
        return mapper


__all__ = ["FactoryContext", "QueryTypeMapperFactory"]
