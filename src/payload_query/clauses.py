"""
Clause variants — the atomic units of serializable query intent.

Each clause closes over the data it needs and renders it with ``build()``:

* :class:`FieldClause` → ``{field: {operator: value}}``
* :class:`AndClause` / :class:`OrClause` → ``{"and"|"or": [child, ...]}``
* :class:`JoinClause` → ``{on: {limit, page, sort, count, where}}``

``build()`` is pure: it takes no arguments, never reads sibling state, and
returns a freshly built dict on every call.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

from .operators import operator_key

if TYPE_CHECKING:
    from .operators import Operator
    from .utils import Json, JsonValue


@runtime_checkable
class Clause(Protocol):
    """Anything that renders itself into a JSON fragment."""

    def build(self) -> Json: ...


@dataclass(frozen=True)
class FieldClause:
    """Single field comparison."""

    field: str
    operator: Operator | str
    value: JsonValue

    def build(self) -> Json:
        value = copy.deepcopy(self.value)
        return {self.field: {operator_key(self.operator): value}}


@dataclass(frozen=True)
class AndClause:
    """Logical AND over an ordered group of clauses."""

    children: tuple[WhereClause, ...]

    def build(self) -> Json:
        return {"and": [child.build() for child in self.children]}


@dataclass(frozen=True)
class OrClause:
    """Logical OR over an ordered group of clauses."""

    children: tuple[WhereClause, ...]

    def build(self) -> Json:
        return {"or": [child.build() for child in self.children]}


WhereClause: TypeAlias = "FieldClause | AndClause | OrClause"


class JoinClause:
    """
    Options for one join target.

    ``on`` is fixed at construction; the remaining fields are overwritten
    in place by the owning :class:`~payload_query.joins.JoinBuilder`
    (last write wins per field). Unset fields are omitted from ``build()``.
    ``build()`` copies ``where``, so edits to a result never reach the clause.
    """

    __slots__ = ("_on", "limit", "page", "sort", "count", "where")

    def __init__(self, on: str) -> None:
        self._on = on
        self.limit: int | None = None
        self.page: int | None = None
        self.sort: str | None = None
        self.count: bool | None = None
        self.where: Json | None = None

    @property
    def on(self) -> str:
        return self._on

    def build(self) -> Json:
        inner: Json = {}
        if self.limit is not None:
            inner["limit"] = self.limit
        if self.page is not None:
            inner["page"] = self.page
        if self.sort is not None:
            inner["sort"] = self.sort
        if self.count is not None:
            inner["count"] = self.count
        if self.where is not None:
            inner["where"] = copy.deepcopy(self.where)
        return {self._on: inner}

    def __repr__(self) -> str:
        return f"JoinClause(on={self._on!r}, {self.build()[self._on]!r})"
