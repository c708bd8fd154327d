"""
Shared helpers for JSON-shaped data and timestamps.

These are pure-Python helpers with no third-party dependencies.
"""

from __future__ import annotations

import datetime
from typing import Any, TypeAlias

Json: TypeAlias = dict[str, Any]
JsonValue: TypeAlias = Any


def is_json_object(value: Any) -> bool:
    """Return ``True`` for a JSON object (a dict), ``False`` for lists and scalars."""
    return isinstance(value, dict)


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


def format_datetime(value: datetime.date) -> str:
    """
    Format a date or datetime as UTC ISO-8601 with millisecond precision.

    ``datetime(2024, 1, 1, 12, tzinfo=UTC)`` → ``"2024-01-01T12:00:00.000Z"``.
    Naive datetimes are taken as UTC; a plain ``date`` is midnight UTC.
    """
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    value = value.astimezone(datetime.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_datetime(value: str) -> datetime.datetime | None:
    """
    Parse an ISO-8601 timestamp as returned by the API.

    Returns ``None`` for empty or unparseable strings.
    """
    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.datetime.fromisoformat(text)
    except ValueError:
        return None
