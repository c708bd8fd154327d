"""
QueryStringEncoder — nested JSON-like data -> bracket-notation query string.

Example::

    QueryStringEncoder().stringify(
        {"where": {"or": [{"title": {"equals": "foo"}}]}, "limit": 10}
    )
    # → "?where[or][0][title][equals]=foo&limit=10"

Rules:

* mappings nest as ``key[child]``, sequences as ``key[index]``;
* keys are visited in insertion order;
* ``None`` values contribute nothing (sequence indices are not renumbered);
* ``bool`` renders as ``true``/``false``, dates as UTC ISO-8601;
* values of any other type (callables, bytes, sets, arbitrary objects)
  are skipped without error.
"""

from __future__ import annotations

import datetime
import logging
import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import quote

from .config import EncoderConfig
from .utils import format_datetime

logger = logging.getLogger("payload_query.encoding")

# Characters encodeURIComponent leaves alone beyond quote()'s always-safe set.
_SAFE = "!*'()"
_SAFE_BRACKETS = _SAFE + "[],"

_PRIMITIVE_TYPES = (str, bool, int, float, Decimal, datetime.date)


class QueryStringEncoder:
    """Serialize nested dicts and lists into a bracket-notation query string."""

    def __init__(
        self,
        config: EncoderConfig | None = None,
        *,
        add_query_prefix: bool | None = None,
        strict_encoding: bool | None = None,
    ) -> None:
        base = config if config is not None else EncoderConfig()
        self._config = base.with_options(
            add_query_prefix=add_query_prefix,
            strict_encoding=strict_encoding,
        )
        self._safe = _SAFE if self._config.strict_encoding else _SAFE_BRACKETS

    @property
    def config(self) -> EncoderConfig:
        return self._config

    def stringify(self, data: Any) -> str:
        """
        Encode *data* into a query string.

        Returns ``""`` when *data* is not a mapping or sequence, or when
        every value was skipped; the ``?`` prefix is only added to
        non-empty output.
        """
        if isinstance(data, Mapping):
            items: Iterable[tuple[Any, Any]] = data.items()
        elif isinstance(data, list | tuple):
            items = enumerate(data)
        else:
            return ""

        segments: list[str] = []
        self._serialize_items(items, "", segments)
        query = "&".join(segments)
        if query and self._config.add_query_prefix:
            return f"?{query}"
        return query

    # -- internals -----------------------------------------------------------

    def _serialize_items(
        self,
        items: Iterable[tuple[Any, Any]],
        prefix: str,
        segments: list[str],
    ) -> None:
        for key, value in items:
            if value is None:
                continue
            encoded_key = self._encode(_key_text(key))
            path = f"{prefix}[{encoded_key}]" if prefix else encoded_key
            self._serialize_value(path, value, segments)

    def _serialize_array(
        self,
        values: list[Any] | tuple[Any, ...],
        prefix: str,
        segments: list[str],
    ) -> None:
        for index, value in enumerate(values):
            if value is None:
                continue
            self._serialize_value(f"{prefix}[{index}]", value, segments)

    def _serialize_value(self, path: str, value: Any, segments: list[str]) -> None:
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, _PRIMITIVE_TYPES):
            segments.append(f"{path}={self._encode(_format_primitive(value))}")
        elif isinstance(value, list | tuple):
            self._serialize_array(value, path, segments)
        elif isinstance(value, Mapping):
            self._serialize_items(value.items(), path, segments)
        else:
            logger.debug(
                "Skipping unsupported value of type %s at %s",
                type(value).__name__,
                path,
            )

    def _encode(self, text: str) -> str:
        return quote(text, safe=self._safe)


def _key_text(key: Any) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def _format_primitive(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, datetime.date):
        return format_datetime(value)
    return str(value)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    # Exponent form only outside 1e-7 <= |x| < 1e21, without zero padding.
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
