"""Query-result abstraction resolved by synthesized GraphQL types.

A query result is an in-progress query over one element class. The
``data`` field applies ``limit``/``offset`` to it in place and iterates it;
the ``meta`` field counts it and describes its element class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

    from typing import Self

T = TypeVar("T")


class QueryResult(ABC, Generic[T]):
    """Limitable, offsettable, countable query over ``element_class``."""

    @property
    @abstractmethod
    def element_class(self) -> type[Any]:
        """Class of the records this query yields."""

    @abstractmethod
    def limit(self, limit: int) -> Self:
        """Restrict the number of yielded records. Mutates and returns self."""

    @abstractmethod
    def offset(self, offset: int) -> Self:
        """Skip records before yielding. Mutates and returns self."""

    @abstractmethod
    def count(self) -> int:
        """Total number of matching records, ignoring limit and offset."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @property
    def class_name(self) -> str:
        """Fully qualified name of the element class."""
        cls = self.element_class
        return f"{cls.__module__}.{cls.__qualname__}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} of {self.element_class.__name__}>"


__all__ = ["QueryResult"]
