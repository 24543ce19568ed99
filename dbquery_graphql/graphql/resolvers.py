"""Field resolvers of synthesized result-set types.

Both resolvers receive the ``QueryResult`` as ``root``. They are shared by
every synthesized type; the element type only shows up in the field's
declared GraphQL type.
"""

from __future__ import annotations

from typing import Annotated

import strawberry

from dbquery_graphql.core.exceptions import MissingParameterError
from dbquery_graphql.graphql.types import DbMeta
from dbquery_graphql.query.base import QueryResult
from dbquery_graphql.query.inspection import is_persistable_model, model_key


def resolve_data(
    root: QueryResult,
    limit: Annotated[
        int | None,
        strawberry.argument(description="Maximum number of records to return"),
    ] = None,
    offset: Annotated[
        int | None,
        strawberry.argument(description="Number of records to skip; requires limit"),
    ] = None,
):
    """Apply paging arguments to the query result and return it.

    The query result is changed in place and returned as-is; the GraphQL
    list is produced by iterating it.

    Raises:
        MissingParameterError: If ``offset`` is given without ``limit``.
    """
    if limit is None and offset is not None:
        raise MissingParameterError.missing_limit()
    if limit is not None:
        root.limit(limit)
    if offset is not None:
        root.offset(offset)
    return root


def resolve_meta(root: QueryResult):
    """Describe the query result: element class, key and total count."""
    element_class = root.element_class
    key = model_key(element_class) if is_persistable_model(element_class) else ""
    return DbMeta(
        name=element_class.__name__,
        class_=root.class_name,
        total=root.count(),
        key=key,
    )


__all__ = ["resolve_data", "resolve_meta"]
