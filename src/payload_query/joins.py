"""
Fluent builder for join-field options.

Every operation is keyed by the join target ``on``. The first reference to
a target creates its :class:`JoinClause`; later references update it in
place. Filters for a target accumulate in a :class:`WhereBuilder` cached
per target, and the clause always holds that builder's latest full result.

An empty ``on`` is ignored, so calls can be composed generically without
checking the target first.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .clauses import JoinClause
from .where import WhereBuilder

if TYPE_CHECKING:
    from collections.abc import Callable

    from .operators import Operator
    from .utils import Json, JsonValue

logger = logging.getLogger("payload_query.joins")


class JoinBuilder:
    """Per-target join options plus a global "disable all joins" switch."""

    def __init__(self) -> None:
        self._clauses: list[JoinClause] = []
        self._where_builders: dict[str, WhereBuilder] = {}
        self._disabled = False

    # -- scalar options ------------------------------------------------------

    def limit(self, on: str, value: int) -> JoinBuilder:
        """Limit the number of joined documents returned for *on*."""
        return self._set(on, "limit", value)

    def page(self, on: str, value: int) -> JoinBuilder:
        """Select the page of joined documents for *on*."""
        return self._set(on, "page", value)

    def sort(self, on: str, field: str) -> JoinBuilder:
        """Sort joined documents for *on*. An empty *field* is ignored."""
        if field == "":
            logger.debug("Ignoring empty sort field for join %r", on)
            return self
        return self._set(on, "sort", field)

    def sort_by_descending(self, on: str, field: str) -> JoinBuilder:
        """Sort joined documents for *on* in descending order of *field*."""
        if field and not field.startswith("-"):
            field = f"-{field}"
        return self.sort(on, field)

    def count(self, on: str, value: bool = True) -> JoinBuilder:
        """Request the total count of joined documents for *on*."""
        return self._set(on, "count", value)

    # -- filters -------------------------------------------------------------

    def where(
        self,
        on: str,
        field: str,
        operator: Operator | str,
        value: JsonValue,
    ) -> JoinBuilder:
        """Add a field comparison to the filter of *on*."""
        return self._configure_where(on, lambda b: b.where(field, operator, value))

    def and_(self, on: str, configure: Callable[[WhereBuilder], object]) -> JoinBuilder:
        """Add an AND group to the filter of *on*."""
        return self._configure_where(on, lambda b: b.and_(configure))

    def or_(self, on: str, configure: Callable[[WhereBuilder], object]) -> JoinBuilder:
        """Add an OR group to the filter of *on*."""
        return self._configure_where(on, lambda b: b.or_(configure))

    # -- disable -------------------------------------------------------------

    @property
    def is_disabled(self) -> bool:
        return self._disabled

    def disable(self) -> JoinBuilder:
        """
        Disable every join for the query.

        Collected options are kept but ignored; the flag is never cleared.
        """
        self._disabled = True
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> Json | bool | None:
        """
        Return ``False`` when disabled, ``None`` when no join target was
        configured, otherwise ``{on: {...}, ...}`` in first-reference order.
        """
        if self._disabled:
            return False
        if not self._clauses:
            return None
        result: Json = {}
        for clause in self._clauses:
            result.update(clause.build())
        return result

    # -- internals -----------------------------------------------------------

    def _set(self, on: str, name: str, value: object) -> JoinBuilder:
        if value is None:
            logger.debug("Ignoring absent %s for join %r", name, on)
            return self
        clause = self._get_or_create_clause(on)
        if clause is not None:
            setattr(clause, name, value)
        return self

    def _get_or_create_clause(self, on: str) -> JoinClause | None:
        if on == "":
            logger.debug("Ignoring join operation with an empty target")
            return None
        for clause in self._clauses:
            if clause.on == on:
                return clause
        clause = JoinClause(on)
        self._clauses.append(clause)
        return clause

    def _get_or_create_where_builder(self, on: str) -> WhereBuilder:
        builder = self._where_builders.get(on)
        if builder is None:
            builder = WhereBuilder()
            self._where_builders[on] = builder
        return builder

    def _configure_where(
        self, on: str, apply: Callable[[WhereBuilder], object]
    ) -> JoinBuilder:
        clause = self._get_or_create_clause(on)
        if clause is None:
            return self
        builder = self._get_or_create_where_builder(on)
        apply(builder)
        clause.where = builder.build()
        return self
