"""GraphQL types for result sets.

``DbMeta`` is declared once. Result-set types are built per element type
by ``build_query_type``, the same way the root types are composed: a class
namespace assembled at runtime and passed through ``strawberry.type``.
"""

from __future__ import annotations

from typing import Any

import strawberry

from dbquery_graphql.graphql.naming import META_TYPE_NAME


@strawberry.type(name=META_TYPE_NAME, description="Aggregate information about a result set")
class DbMeta:
    """Metadata of a result set, resolved from its query."""

    total: int | None = strawberry.field(
        default=None,
        description="Total number of records",
    )
    class_: str | None = strawberry.field(
        default=None,
        name="class",
        description="Class name of the records",
    )
    key: str | None = strawberry.field(
        default=None,
        description="Primary key of the records, empty when not persisted",
    )
    name: str | None = strawberry.field(
        default=None,
        description="Name of the records",
    )


def build_query_type(type_name: str, element_type: Any, meta_type: type) -> type:
    """Build the result-set object type wrapping ``element_type``.

    Args:
        type_name: GraphQL name of the new type (``DB_QUERY_<Element>``)
        element_type: Non-null element annotation
        meta_type: Shared metadata type

    Returns:
        A Strawberry object type with ``data`` and ``meta`` fields

    Example:
        UserQuery = build_query_type("DB_QUERY_User", UserType, DbMeta)

        # Produces:
        # type DB_QUERY_User {
        #   data(limit: Int, offset: Int): [User!]!
        #   meta: DB_META!
        # }
    """
    # Imported here: resolvers build DbMeta instances from this module
    from dbquery_graphql.graphql.resolvers import resolve_data, resolve_meta

    namespace = {
        "__module__": __name__,
        "__annotations__": {
            "data": list[element_type],
            "meta": meta_type,
        },
        "data": strawberry.field(
            resolver=resolve_data,
            description="Records of the result set",
        ),
        "meta": strawberry.field(
            resolver=resolve_meta,
            description="The total count of items.",
        ),
    }
    query_type = type(type_name, (), namespace)
    return strawberry.type(
        query_type,
        name=type_name,
        description="Paginated, countable result set",
    )


__all__ = ["DbMeta", "build_query_type"]
