"""
Typed records for query parameters and API responses.

Responses are mapped leniently by :mod:`payload_query.mappers`; query
parameters are validated strictly by :meth:`QueryParameters.from_dict`.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import MappingError

if TYPE_CHECKING:
    from .builder import QueryBuilder


class Document(BaseModel):
    """A single collection document. ``data`` keeps the raw JSON object."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    data: dict[str, Any] = Field(default_factory=dict)


class PaginatedDocs(BaseModel):
    """One page of documents plus the pagination metadata."""

    model_config = ConfigDict(frozen=True)

    docs: list[Document] = Field(default_factory=list)
    has_next_page: bool = False
    has_prev_page: bool = False
    limit: int = 10
    total_docs: int = 0
    total_pages: int = 1
    page: int | None = None
    next_page: int | None = None
    prev_page: int | None = None


class TotalDocs(BaseModel):
    """Result of a count request."""

    model_config = ConfigDict(frozen=True)

    total_docs: int = 0


class QueryParameters(BaseModel):
    """
    Typed view of :meth:`QueryBuilder.build` output.

    ``joins`` is ``False`` when joins are disabled and ``None`` when no
    join was configured.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    limit: int | None = None
    page: int | None = None
    sort: str | None = None
    depth: int | None = None
    locale: str | None = None
    fallback_locale: str | None = Field(default=None, alias="fallback-locale")
    select: str | None = None
    populate: str | None = None
    where: dict[str, Any] | None = None
    joins: dict[str, Any] | Literal[False] | None = None

    @classmethod
    def from_builder(cls, builder: QueryBuilder) -> QueryParameters:
        return cls.from_dict(builder.build())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QueryParameters:
        """
        Validate a raw parameter dict.

        Raises:
            MappingError: If a key is unknown or a value has the wrong type.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            path = ".".join(str(part) for part in first["loc"]) or None
            raise MappingError(
                f"Invalid query parameters: {first['msg']}", path=path
            ) from exc

    def to_dict(self) -> dict[str, Any]:
        """Return the wire-shaped dict (hyphenated keys, unset options omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)
