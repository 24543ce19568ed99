"""SQLAlchemy-backed query result.

Wraps a ``Select`` over one mapped model. Filters and ordering are applied
to the base statement; limit and offset are kept apart so ``count()``
always reports the full filtered total.

Example:
    query = SelectQuery(session, User).where(User.is_active.is_(True))
    query.order_by(User.created_at.desc()).limit(20).offset(40)
    total = query.count()     # every active user
    page = list(query)        # at most 20 of them
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from sqlalchemy import func, select

from dbquery_graphql.infra.logging import get_lazy_logger
from dbquery_graphql.query.base import QueryResult

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Self

    from sqlalchemy import Select
    from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class SelectQuery(QueryResult[ModelT]):
    """Query result over a SQLAlchemy ``Select`` executed on a ``Session``."""

    def __init__(
        self,
        session: Session,
        model: type[ModelT],
        statement: Select[tuple[ModelT]] | None = None,
    ) -> None:
        self._session = session
        self._model = model
        self._statement = statement if statement is not None else select(model)
        self._limit: int | None = None
        self._offset: int | None = None
        self._lazy = get_lazy_logger(__name__)

    @property
    def element_class(self) -> type[ModelT]:
        return self._model

    def where(self, *criteria: Any) -> Self:
        self._statement = self._statement.where(*criteria)
        return self

    def order_by(self, *clauses: Any) -> Self:
        self._statement = self._statement.order_by(*clauses)
        return self

    def limit(self, limit: int) -> Self:
        self._limit = limit
        return self

    def offset(self, offset: int) -> Self:
        self._offset = offset
        return self

    @property
    def statement(self) -> Select[tuple[ModelT]]:
        """Filtered statement with limit and offset applied."""
        stmt = self._statement
        if self._limit is not None:
            stmt = stmt.limit(self._limit)
        if self._offset is not None:
            stmt = stmt.offset(self._offset)
        return stmt

    def count(self) -> int:
        count_stmt = select(func.count()).select_from(self._statement.subquery())
        total = self._session.execute(count_stmt).scalar_one()
        self._lazy.debug(lambda: f"db.count: {self._model.__name__} -> {total}")
        return total

    def __iter__(self) -> Iterator[ModelT]:
        items = self._session.scalars(self.statement).all()
        self._lazy.debug(
            lambda: f"db.list: {self._model.__name__}(limit={self._limit}, offset={self._offset}) -> {len(items)} items"
        )
        return iter(items)


__all__ = ["SelectQuery"]
