"""In-memory query result over a Python sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from dbquery_graphql.query.base import QueryResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Self

T = TypeVar("T")


class ListQuery(QueryResult[T]):
    """Query result backed by a list.

    ``element_class`` defaults to the class of the first item; pass it
    explicitly when the list may be empty.
    """

    def __init__(self, items: Iterable[T], element_class: type[Any] | None = None) -> None:
        self._items = list(items)
        if element_class is None:
            if not self._items:
                raise ValueError("element_class is required for an empty ListQuery")
            element_class = type(self._items[0])
        self._element_class = element_class
        self._limit: int | None = None
        self._offset: int | None = None

    @property
    def element_class(self) -> type[Any]:
        return self._element_class

    def limit(self, limit: int) -> Self:
        self._limit = limit
        return self

    def offset(self, offset: int) -> Self:
        self._offset = offset
        return self

    def count(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        start = self._offset or 0
        stop = None if self._limit is None else start + self._limit
        return iter(self._items[start:stop])


__all__ = ["ListQuery"]
