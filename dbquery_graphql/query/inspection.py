"""SQLAlchemy class inspection for result-set metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect as sa_inspect

if TYPE_CHECKING:
    from sqlalchemy.orm import Mapper


def _get_mapper(cls: Any) -> Mapper[Any] | None:
    if not isinstance(cls, type):
        return None
    mapper = sa_inspect(cls, raiseerr=False)
    # inspect() also answers for non-ORM inspectables such as Table
    if mapper is None or not hasattr(mapper, "primary_key"):
        return None
    return mapper


def is_persistable_model(cls: Any) -> bool:
    """Check whether ``cls`` is a mapped SQLAlchemy model.

    Example:
        >>> is_persistable_model(User)
        True
        >>> is_persistable_model(UserType)
        False
    """
    return _get_mapper(cls) is not None


def model_key(cls: Any) -> str:
    """Return the primary-key attribute name(s) of a mapped model.

    Composite keys are joined with commas in column order. Classes that are
    not mapped yield an empty string.

    Example:
        >>> model_key(User)
        'id'
        >>> model_key(OrderLine)
        'order_id,line_no'
    """
    mapper = _get_mapper(cls)
    if mapper is None:
        return ""
    return ",".join(
        mapper.get_property_by_column(column).key for column in mapper.primary_key
    )


__all__ = ["is_persistable_model", "model_key"]
