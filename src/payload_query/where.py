"""
Fluent builder for one filter scope.

Example::

    where = (
        WhereBuilder()
        .where("author", Operator.EQUALS, "Alice")
        .or_(
            lambda g: g.where("title", "contains", "Deckbuilding")
            .where("title", "contains", "Gloomhaven")
        )
        .build()
    )
    # → {"author": {"equals": "Alice"},
    #    "or": [{"title": {"contains": "Deckbuilding"}},
    #           {"title": {"contains": "Gloomhaven"}}]}

Two merge strategies apply and are kept distinct: ``where`` on a field that
was already used overwrites it (flattening is a shallow key assignment),
while every ``and_``/``or_`` call appends a new group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clauses import AndClause, FieldClause, OrClause

if TYPE_CHECKING:
    from collections.abc import Callable

    from .clauses import WhereClause
    from .operators import Operator
    from .utils import Json, JsonValue


class WhereBuilder:
    """Collects clauses for one filter scope and flattens them into a dict."""

    def __init__(self) -> None:
        self._clauses: list[WhereClause] = []

    @property
    def clauses(self) -> tuple[WhereClause, ...]:
        """The accumulated clauses, in call order."""
        return tuple(self._clauses)

    def where(
        self,
        field: str,
        operator: Operator | str,
        value: JsonValue,
    ) -> WhereBuilder:
        """Add a field comparison to this scope."""
        self._clauses.append(FieldClause(field, operator, value))
        return self

    def and_(self, configure: Callable[[WhereBuilder], object]) -> WhereBuilder:
        """
        Add an AND group.

        *configure* is called immediately with a fresh nested builder; the
        clauses it collects become the group's children.
        """
        nested = WhereBuilder()
        configure(nested)
        self._clauses.append(AndClause(nested.clauses))
        return self

    def or_(self, configure: Callable[[WhereBuilder], object]) -> WhereBuilder:
        """Add an OR group. See :meth:`and_`."""
        nested = WhereBuilder()
        configure(nested)
        self._clauses.append(OrClause(nested.clauses))
        return self

    def build(self) -> Json | None:
        """
        Flatten the clauses into one dict.

        Returns ``None`` when nothing was added. Fragments are merged in
        insertion order; a later fragment replaces an earlier one with the
        same top-level key.
        """
        if not self._clauses:
            return None
        result: Json = {}
        for clause in self._clauses:
            result.update(clause.build())
        return result
