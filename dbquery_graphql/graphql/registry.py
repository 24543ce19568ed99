"""Registry of named GraphQL types used during schema building.

The registry owns the types declared up front (object types, enums,
scalars) and delegates every other name to the type mappers registered
with it. Mappers resolve names they synthesize themselves, and call back
into the registry for the element types they wrap.

Example:
    registry = TypeRegistry([UserType, PostType])
    registry.add_mapper(mapper)

    registry.resolve_type_by_name("User")           # UserType
    registry.resolve_type_by_name("DB_QUERY_User")  # synthesized by mapper
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from dbquery_graphql.core.exceptions import CannotMapTypeError
from dbquery_graphql.graphql.type_utils import (
    BUILTIN_SCALARS,
    default_scalar_types,
    graphql_name_of,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@runtime_checkable
class TypeMapper(Protocol):
    """Interface the registry expects from a type mapper."""

    def can_map_class_to_type(self, class_name: Any) -> bool: ...

    def map_class_to_type(self, class_name: Any, sub_type: Any | None) -> Any: ...

    def can_map_name_to_type(self, type_name: str) -> bool: ...

    def map_name_to_type(self, type_name: str) -> Any: ...

    def get_supported_classes(self) -> list[type]: ...

    def can_map_class_to_input_type(self, class_name: Any) -> bool: ...

    def map_class_to_input_type(self, class_name: Any) -> Any: ...

    def can_extend_type_for_class(self, class_name: Any, type_: Any) -> bool: ...

    def extend_type_for_class(self, class_name: Any, type_: Any) -> None: ...

    def can_extend_type_for_name(self, type_name: str, type_: Any) -> bool: ...

    def extend_type_for_name(self, type_name: str, type_: Any) -> None: ...

    def can_decorate_input_type_for_name(self, type_name: str, type_: Any) -> bool: ...

    def decorate_input_type_for_name(self, type_name: str, type_: Any) -> None: ...


class TypeRegistry:
    """Named types plus the mappers consulted for unknown names."""

    def __init__(
        self,
        types: Iterable[Any] = (),
        *,
        include_builtin_scalars: bool = True,
    ) -> None:
        self._types: dict[str, Any] = {}
        self._mappers: list[TypeMapper] = []
        if include_builtin_scalars:
            for scalar, name in BUILTIN_SCALARS.items():
                self._types[name] = scalar
            for name, scalar in default_scalar_types().items():
                self._types.setdefault(name, scalar)
        self.register(*types)

    def register(self, *types: Any) -> None:
        """Register named types under their GraphQL names.

        Raises:
            ValueError: If a type has no GraphQL name, or the name is
                already taken by a different type.
        """
        for type_ in types:
            name = graphql_name_of(type_)
            if name is None:
                raise ValueError(f"{type_!r} is not a named GraphQL type")
            existing = self._types.get(name)
            if existing is not None and existing is not type_:
                raise ValueError(f"GraphQL type name {name!r} is already registered")
            self._types[name] = type_
            logger.debug("Registered GraphQL type %s", name)

    def add_mapper(self, mapper: TypeMapper) -> None:
        self._mappers.append(mapper)
        logger.debug("Added type mapper %s", type(mapper).__name__)

    @property
    def mappers(self) -> tuple[TypeMapper, ...]:
        return tuple(self._mappers)

    def names(self) -> list[str]:
        """Names of the directly registered types."""
        return list(self._types)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def resolve_type_by_name(self, type_name: str) -> Any:
        """Resolve a GraphQL type name to its type.

        Registered types win; otherwise the first mapper that accepts the
        name produces it.

        Raises:
            CannotMapTypeError: If nothing knows the name.
        """
        type_ = self._types.get(type_name)
        if type_ is not None:
            return type_
        for mapper in self._mappers:
            if mapper.can_map_name_to_type(type_name):
                return mapper.map_name_to_type(type_name)
        raise CannotMapTypeError.create_for_name(type_name)

    def map_class_to_type(self, class_name: Any, sub_type: Any | None = None) -> Any:
        """Map a class through the first mapper that supports it.

        Raises:
            CannotMapTypeError: If no mapper supports the class.
        """
        for mapper in self._mappers:
            if mapper.can_map_class_to_type(class_name):
                return mapper.map_class_to_type(class_name, sub_type)
        raise CannotMapTypeError.create_for_type(class_name)


__all__ = ["TypeMapper", "TypeRegistry"]
