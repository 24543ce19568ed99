"""Type mapper synthesizing result-set types for query results.

A field returning a ``QueryResult`` is exposed as ``DB_QUERY_<Element>``:

    type DB_QUERY_User {
      data(limit: Int, offset: Int): [User!]!
      meta: DB_META!
    }

Types are built on first request, by element type or by schema name, and
cached for the lifetime of the mapper so both paths hand out the same
object.

Example:
    registry = TypeRegistry([UserType])
    mapper = QueryTypeMapperFactory().create(FactoryContext(registry=registry))

    UserQuery = mapper.map_class_to_type(QueryResult, UserType)
    assert mapper.map_name_to_type("DB_QUERY_User") is UserQuery
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, NoReturn

from dbquery_graphql.core.exceptions import CannotMapTypeError, MissingParameterError
from dbquery_graphql.graphql.naming import (
    META_TYPE_NAME,
    decode,
    encode,
    is_query_type_name,
)
from dbquery_graphql.graphql.type_utils import (
    element_type_of,
    graphql_name_of,
    is_output_type,
)
from dbquery_graphql.graphql.types import DbMeta, build_query_type
from dbquery_graphql.infra.logging import get_lazy_logger
from dbquery_graphql.query.base import QueryResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from dbquery_graphql.graphql.factory import FactoryContext

logger = logging.getLogger(__name__)
_lazy = get_lazy_logger(__name__)


class QueryTypeMapper:
    """Maps ``QueryResult`` to synthesized result-set types.

    Only output types are produced. Input mapping, type extension and
    input decoration are refused.
    """

    def __init__(self, context: FactoryContext) -> None:
        self._context = context
        self._cache: dict[str, Any] = {}
        # Re-entrant: building a result-set type also fetches the meta type
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Output types
    # ------------------------------------------------------------------

    def can_map_class_to_type(self, class_name: Any) -> bool:
        """Only ``QueryResult`` itself is mapped; subclasses are not."""
        return class_name is QueryResult

    def map_class_to_type(self, class_name: Any, sub_type: Any | None) -> Any:
        """Return the result-set type for ``class_name`` wrapping ``sub_type``.

        Raises:
            MissingParameterError: If no element type is given.
            CannotMapTypeError: If ``class_name`` is not ``QueryResult``.
        """
        if sub_type is None:
            raise MissingParameterError.no_sub_type()
        if not self.can_map_class_to_type(class_name):
            raise CannotMapTypeError.create_for_type(class_name)
        return self._get_object_type(sub_type)

    def can_map_name_to_type(self, type_name: str) -> bool:
        return type_name == META_TYPE_NAME or is_query_type_name(type_name)

    def map_name_to_type(self, type_name: str) -> Any:
        """Return the type named ``type_name``, building it if needed.

        The element type of a ``DB_QUERY_`` name is looked up in the
        registry by its decoded name.

        Raises:
            CannotMapTypeError: If the name is not one of ours, the element
                name is unknown, or it names an input type.
        """
        if not self.can_map_name_to_type(type_name):
            raise CannotMapTypeError.create_for_name(type_name)

        if type_name == META_TYPE_NAME:
            return self._get_meta_object_type()

        sub_type_name = decode(type_name)
        sub_type = self._context.registry.resolve_type_by_name(sub_type_name)
        if not is_output_type(sub_type):
            raise CannotMapTypeError.must_be_output_type(sub_type_name)
        return self._get_object_type(sub_type)

    def get_supported_classes(self) -> list[type]:
        # Result sets are reached through their element type only; they never
        # hide behind interfaces, so there is nothing to enumerate.
        return []

    # ------------------------------------------------------------------
    # Refused capabilities
    # ------------------------------------------------------------------

    def can_map_class_to_input_type(self, class_name: Any) -> bool:
        return False

    def map_class_to_input_type(self, class_name: Any) -> NoReturn:
        self._refuse(CannotMapTypeError.create_for_input_type, class_name)

    def can_extend_type_for_class(self, class_name: Any, type_: Any) -> bool:
        return False

    def extend_type_for_class(self, class_name: Any, type_: Any) -> NoReturn:
        self._refuse(CannotMapTypeError.create_for_extend_type, class_name, type_)

    def can_extend_type_for_name(self, type_name: str, type_: Any) -> bool:
        return False

    def extend_type_for_name(self, type_name: str, type_: Any) -> NoReturn:
        self._refuse(CannotMapTypeError.create_for_extend_name, type_name, type_)

    def can_decorate_input_type_for_name(self, type_name: str, type_: Any) -> bool:
        return False

    def decorate_input_type_for_name(self, type_name: str, type_: Any) -> NoReturn:
        self._refuse(CannotMapTypeError.create_for_decorate_name, type_name, type_)

    def _refuse(
        self,
        build_error: Callable[..., CannotMapTypeError],
        *args: Any,
    ) -> NoReturn:
        error = build_error(*args)
        logger.debug("Refused %s: %s", build_error.__name__, error.identifier)
        raise error

    # ------------------------------------------------------------------
    # Synthesis
    # ------------------------------------------------------------------

    def _get_meta_object_type(self) -> type:
        with self._lock:
            meta_type = self._cache.get(META_TYPE_NAME)
            if meta_type is None:
                meta_type = self._cache[META_TYPE_NAME] = DbMeta
            return meta_type

    def _get_object_type(self, sub_type: Any) -> Any:
        sub_type = element_type_of(sub_type)
        name = graphql_name_of(sub_type)
        if name is None:
            raise RuntimeError(f"Cannot get a GraphQL name from sub type {sub_type!r}")

        type_name = encode(name)
        with self._lock:
            cached = self._cache.get(type_name)
            if cached is not None:
                return cached

            meta_type = self._get_meta_object_type()
            query_type = build_query_type(type_name, sub_type, meta_type)
            self._cache[type_name] = query_type

        _lazy.debug(lambda: f"Synthesized {type_name} wrapping {name}")
        return query_type

    @property
    def cached_type_names(self) -> list[str]:
        """Names of the types built so far."""
        with self._lock:
            return list(self._cache)


__all__ = ["QueryTypeMapper"]
