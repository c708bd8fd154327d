"""
Lenient mapping between raw API JSON and the typed records.

Only values with the expected JSON type are copied; anything else falls
back to the record's default instead of failing the whole response.
"""

from __future__ import annotations

import logging
from typing import Any

from .models import Document, PaginatedDocs, TotalDocs
from .utils import Json, format_datetime, is_json_object, parse_datetime

logger = logging.getLogger("payload_query.mappers")

_PAGINATION_FLAGS = {
    "hasNextPage": "has_next_page",
    "hasPrevPage": "has_prev_page",
}
_PAGINATION_NUMBERS = {
    "limit": "limit",
    "totalDocs": "total_docs",
    "totalPages": "total_pages",
    "page": "page",
    "nextPage": "next_page",
    "prevPage": "prev_page",
}


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _timestamp(data: Json, key: str) -> Any:
    raw = data.get(key)
    if not isinstance(raw, str) or raw == "":
        return None
    parsed = parse_datetime(raw)
    if parsed is None:
        logger.debug("Ignoring unparseable %s timestamp %r", key, raw)
    return parsed


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


def document_from_json(json: Json | None) -> Document:
    data: Json = json if is_json_object(json) else {}
    raw_id = data.get("id")
    return Document(
        id=raw_id if isinstance(raw_id, str) else "",
        created_at=_timestamp(data, "createdAt"),
        updated_at=_timestamp(data, "updatedAt"),
        data=data,
    )


def document_to_json(document: Document) -> Json:
    result: Json = {**document.data, "id": document.id}
    if document.created_at is not None:
        result["createdAt"] = format_datetime(document.created_at)
    if document.updated_at is not None:
        result["updatedAt"] = format_datetime(document.updated_at)
    return result


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


def paginated_docs_from_json(json: Json | None) -> PaginatedDocs:
    """Map a paginated ``find`` response; non-object entries in ``docs`` are dropped."""
    data: Json = json if is_json_object(json) else {}
    values: dict[str, Any] = {}

    raw_docs = data.get("docs")
    if isinstance(raw_docs, list):
        docs = [document_from_json(doc) for doc in raw_docs if is_json_object(doc)]
        if len(docs) != len(raw_docs):
            logger.debug("Dropped %d non-object docs", len(raw_docs) - len(docs))
        values["docs"] = docs

    for key, name in _PAGINATION_FLAGS.items():
        if isinstance(data.get(key), bool):
            values[name] = data[key]

    for key, name in _PAGINATION_NUMBERS.items():
        number = _as_int(data.get(key))
        if number is not None:
            values[name] = number

    return PaginatedDocs(**values)


def total_docs_from_json(json: Json | None) -> TotalDocs:
    data: Json = json if is_json_object(json) else {}
    total = _as_int(data.get("totalDocs"))
    return TotalDocs(total_docs=total) if total is not None else TotalDocs()


def total_docs_to_json(total: TotalDocs) -> Json:
    return {"totalDocs": total.total_docs}
