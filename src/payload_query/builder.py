"""
Fluent builder for the full set of query parameters.

Example::

    params = (
        QueryBuilder()
        .limit(10)
        .sort("date")
        .sort_by_descending("title")
        .select(["title", "author"])
        .where("author", "equals", "Alice")
        .join(lambda j: j.limit("posts", 1))
        .build()
    )
    # → {"limit": 10, "sort": "date,-title", "select": "title,author",
    #    "where": {"author": {"equals": "Alice"}},
    #    "joins": {"posts": {"limit": 1}}}

``sort`` and ``select`` append to a comma-separated list on every call;
every other option is overwritten.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .joins import JoinBuilder
from .where import WhereBuilder

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .operators import Operator
    from .utils import Json, JsonValue


class QueryBuilder:
    """
    Root query composition.

    Holds the scalar options plus one root :class:`WhereBuilder` and one
    :class:`JoinBuilder`, both created with the builder and never replaced.
    """

    def __init__(self) -> None:
        self._limit: int | None = None
        self._page: int | None = None
        self._sort: str | None = None
        self._depth: int | None = None
        self._locale: str | None = None
        self._fallback_locale: str | None = None
        self._select: str | None = None
        self._populate: str | None = None
        self._where_builder = WhereBuilder()
        self._join_builder = JoinBuilder()

    # -- result shaping ------------------------------------------------------

    def limit(self, value: int) -> QueryBuilder:
        """Maximum number of documents to return."""
        self._limit = value
        return self

    def page(self, value: int) -> QueryBuilder:
        """Page of results to return (1-based)."""
        self._page = value
        return self

    def sort(self, field: str) -> QueryBuilder:
        """Sort ascending by *field*; repeated calls add sort keys."""
        self._sort = field if not self._sort else f"{self._sort},{field}"
        return self

    def sort_by_descending(self, field: str) -> QueryBuilder:
        """Sort descending by *field*; repeated calls add sort keys."""
        return self.sort(field if field.startswith("-") else f"-{field}")

    def depth(self, value: int) -> QueryBuilder:
        """Relationship population depth."""
        self._depth = value
        return self

    def locale(self, value: str) -> QueryBuilder:
        self._locale = value
        return self

    def fallback_locale(self, value: str) -> QueryBuilder:
        self._fallback_locale = value
        return self

    def select(self, fields: Sequence[str]) -> QueryBuilder:
        """Restrict returned fields; repeated calls add fields."""
        joined = ",".join(fields)
        self._select = joined if not self._select else f"{self._select},{joined}"
        return self

    def populate(self, fields: Sequence[str]) -> QueryBuilder:
        """Relationships to populate; replaces any earlier value."""
        self._populate = ",".join(fields)
        return self

    # -- filtering -----------------------------------------------------------

    def where(
        self,
        field: str,
        operator: Operator | str,
        value: JsonValue,
    ) -> QueryBuilder:
        """Add a field comparison to the root filter."""
        self._where_builder.where(field, operator, value)
        return self

    def and_(self, configure: Callable[[WhereBuilder], object]) -> QueryBuilder:
        """Add an AND group to the root filter."""
        self._where_builder.and_(configure)
        return self

    def or_(self, configure: Callable[[WhereBuilder], object]) -> QueryBuilder:
        """Add an OR group to the root filter."""
        self._where_builder.or_(configure)
        return self

    # -- joins ---------------------------------------------------------------

    def join(self, configure: Callable[[JoinBuilder], object]) -> QueryBuilder:
        """Configure joins; *configure* is called immediately with the join builder."""
        configure(self._join_builder)
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> Json:
        """
        Return the query parameters.

        Only options that were set appear in the result. ``joins`` is
        ``False`` when joins were disabled.
        """
        result: Json = {}
        if self._limit is not None:
            result["limit"] = self._limit
        if self._page is not None:
            result["page"] = self._page
        if self._sort is not None:
            result["sort"] = self._sort
        if self._depth is not None:
            result["depth"] = self._depth
        if self._locale is not None:
            result["locale"] = self._locale
        if self._fallback_locale is not None:
            result["fallback-locale"] = self._fallback_locale
        if self._select is not None:
            result["select"] = self._select
        if self._populate is not None:
            result["populate"] = self._populate

        where = self._where_builder.build()
        if where is not None:
            result["where"] = where

        if self._join_builder.is_disabled:
            result["joins"] = False
        else:
            joins = self._join_builder.build()
            if joins is not None:
                result["joins"] = joins
        return result
