"""Helpers for naming and classifying Strawberry type annotations."""

from __future__ import annotations

import datetime
import decimal
import types
import uuid
from typing import Annotated, Any, ForwardRef, Union, get_args, get_origin

import strawberry
from strawberry.schema.types.scalar import DEFAULT_SCALAR_REGISTRY
from strawberry.types.base import StrawberryOptional
from strawberry.types.lazy_type import LazyType, StrawberryLazyReference

BUILTIN_SCALARS: dict[Any, str] = {
    int: "Int",
    float: "Float",
    str: "String",
    bool: "Boolean",
    strawberry.ID: "ID",
    datetime.datetime: "DateTime",
    datetime.date: "Date",
    datetime.time: "Time",
    decimal.Decimal: "Decimal",
    uuid.UUID: "UUID",
}

# Attributes Strawberry stores its definitions under
_DEFINITION_ATTRIBUTES = (
    "__strawberry_definition__",
    "_enum_definition",
    "_scalar_definition",
)


def unwrap_optional(annotation: Any) -> Any:
    """Strip one nullable wrapper from a type annotation.

    ``User | None``, ``Optional[User]`` and Strawberry's own optional
    wrapper all become ``User``; anything else is returned unchanged.
    """
    if isinstance(annotation, StrawberryOptional):
        return annotation.of_type

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        non_null = [arg for arg in args if arg is not type(None)]
        if len(non_null) == 1 and len(args) == 2:
            return non_null[0]
    return annotation


def resolve_lazy(annotation: Any) -> Any:
    """Resolve a lazy type reference to the type it points to.

    Handles ``Annotated["User", strawberry.lazy("app.users")]`` and bare
    ``LazyType`` instances; anything else is returned unchanged.
    """
    if isinstance(annotation, LazyType):
        return annotation.resolve_type()

    if get_origin(annotation) is Annotated:
        target, *metadata = get_args(annotation)
        for item in metadata:
            if isinstance(item, StrawberryLazyReference):
                if not isinstance(target, ForwardRef):
                    target = ForwardRef(target)
                return item.resolve_forward_ref(target).resolve_type()
    return annotation


def element_type_of(annotation: Any) -> Any:
    """Normalize an element annotation: drop nullability, resolve laziness."""
    return resolve_lazy(unwrap_optional(annotation))


def _lookup_scalar_name(annotation: Any) -> str | None:
    try:
        name = BUILTIN_SCALARS.get(annotation)
        definition = DEFAULT_SCALAR_REGISTRY.get(annotation)
    except TypeError:
        # unhashable annotations
        return None
    if name is not None:
        return name
    if definition is None:
        return None
    # ScalarWrapper in older releases, ScalarDefinition otherwise
    definition = getattr(definition, "_scalar_definition", definition)
    return getattr(definition, "name", None)


def graphql_name_of(annotation: Any) -> str | None:
    """Return the GraphQL name of a named type annotation, or None.

    Lists, unions and plain Python classes have no single GraphQL name.
    """
    if annotation is None or annotation is type(None):
        return None

    scalar_name = _lookup_scalar_name(annotation)
    if scalar_name is not None:
        return scalar_name

    if get_origin(annotation) is not None:
        return None

    for attribute in _DEFINITION_ATTRIBUTES:
        definition = getattr(annotation, attribute, None)
        if definition is not None:
            return definition.name
    return None


def default_scalar_types() -> dict[str, Any]:
    """Scalars Strawberry knows without a ``scalar_overrides`` entry, by name."""
    scalars: dict[str, Any] = {}
    for annotation in DEFAULT_SCALAR_REGISTRY:
        name = graphql_name_of(annotation)
        if name is not None:
            scalars.setdefault(name, annotation)
    return scalars


def is_output_type(annotation: Any) -> bool:
    """Check whether a named type may appear in an output position."""
    if graphql_name_of(annotation) is None:
        return False
    definition = getattr(annotation, "__strawberry_definition__", None)
    if definition is None:
        # scalars and enums
        return True
    return not getattr(definition, "is_input", False)


__all__ = [
    "BUILTIN_SCALARS",
    "default_scalar_types",
    "element_type_of",
    "graphql_name_of",
    "is_output_type",
    "resolve_lazy",
    "unwrap_optional",
]
