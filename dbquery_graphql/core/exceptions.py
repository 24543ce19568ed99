"""Exception classes for GraphQL type mapping and result-set resolution."""

from __future__ import annotations

from typing import Any


class DbQueryError(Exception):
    """Base exception for the package.

    Attributes:
        detail: Human-readable error message.
        type: Error type identifier.
        extra: Additional context-specific information about the error.

    Subclasses decide whether their message may reach a GraphQL client
    (``is_client_safe``) and which category it is filed under. graphql-core
    copies ``extensions`` onto the located error, so the category ends up in
    the response.
    """

    is_client_safe: bool = False
    category: str = "internal"

    def __init__(
        self,
        detail: str,
        type: str = "db-query-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.detail = detail
        self.type = type
        self.extra = extra or {}
        super().__init__(detail)

    @property
    def extensions(self) -> dict[str, Any]:
        """GraphQL error extensions for this exception."""
        return {
            "code": self.type.upper().replace("-", "_"),
            "category": self.category,
            **self.extra,
        }


class CannotMapTypeError(DbQueryError):
    """Raised when a class or GraphQL name cannot be mapped by a type mapper.

    Example:
        raise CannotMapTypeError.create_for_name("DB_QUERY_Missing")
    """

    category = "type_mapping"

    def __init__(
        self,
        detail: str,
        identifier: str | None = None,
        type: str = "cannot-map-type",
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.identifier = identifier
        merged = {"identifier": identifier} if identifier is not None else {}
        merged.update(extra or {})
        super().__init__(detail, type=type, extra=merged)

    @classmethod
    def create_for_type(cls, class_name: Any) -> CannotMapTypeError:
        name = _qualified_name(class_name)
        return cls(
            f'cannot map class "{name}" to a known GraphQL type. '
            "Check the class is a supported query result.",
            identifier=name,
        )

    @classmethod
    def create_for_name(cls, type_name: str) -> CannotMapTypeError:
        return cls(
            f'cannot find GraphQL type "{type_name}". Check the type is registered.',
            identifier=type_name,
        )

    @classmethod
    def create_for_input_type(cls, class_name: Any) -> CannotMapTypeError:
        name = _qualified_name(class_name)
        return cls(
            f'cannot map class "{name}" to a known GraphQL input type.',
            identifier=name,
        )

    @classmethod
    def create_for_extend_type(cls, class_name: Any, type_: Any) -> CannotMapTypeError:
        name = _qualified_name(class_name)
        return cls(
            f'cannot extend GraphQL type "{_type_label(type_)}" mapped by class "{name}".',
            identifier=name,
        )

    @classmethod
    def create_for_extend_name(cls, type_name: str, type_: Any) -> CannotMapTypeError:
        return cls(
            f'cannot extend GraphQL type "{_type_label(type_)}" with type "{type_name}".',
            identifier=type_name,
        )

    @classmethod
    def create_for_decorate_name(cls, type_name: str, type_: Any) -> CannotMapTypeError:
        return cls(
            f'cannot decorate GraphQL input type "{_type_label(type_)}" with type "{type_name}".',
            identifier=type_name,
        )

    @classmethod
    def must_be_output_type(cls, type_name: str) -> CannotMapTypeError:
        return cls(
            f'type "{type_name}" must be an output type.',
            identifier=type_name,
        )


class MissingParameterError(CannotMapTypeError):
    """A result set was requested or resolved without a required parameter.

    The message explains what to add, so it is safe to show to clients.
    """

    is_client_safe = True
    category = "db_query"

    def __init__(self, detail: str, type: str = "missing-parameter") -> None:
        super().__init__(detail, type=type)

    @classmethod
    def missing_limit(cls) -> MissingParameterError:
        return cls(
            'In the data field of a result set, you cannot add an "offset" '
            'without also adding a "limit"',
        )

    @classmethod
    def no_sub_type(cls) -> MissingParameterError:
        return cls(
            "Result sets need to have a subtype. Pass the element type when "
            'mapping the query result, for instance "QueryResult[User]"',
        )


def _qualified_name(value: Any) -> str:
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    return str(value)


def _type_label(type_: Any) -> str:
    definition = getattr(type_, "__strawberry_definition__", None)
    if definition is not None:
        return definition.name
    return getattr(type_, "name", None) or getattr(type_, "__name__", repr(type_))


__all__ = [
    "CannotMapTypeError",
    "DbQueryError",
    "MissingParameterError",
]
