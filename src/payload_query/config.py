"""Encoder configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class EncoderConfig:
    """
    Immutable options for :class:`~payload_query.encoding.QueryStringEncoder`.

    Attributes:
        add_query_prefix: Prefix non-empty output with ``?``.
        strict_encoding: Percent-encode ``[``, ``]`` and ``,`` too. When
            ``False`` they stay literal, as the bracket filter syntax expects.
    """

    add_query_prefix: bool = True
    strict_encoding: bool = False

    def with_options(
        self,
        *,
        add_query_prefix: bool | None = None,
        strict_encoding: bool | None = None,
    ) -> EncoderConfig:
        """Return a copy with the given options replaced."""
        changes: dict[str, bool] = {}
        if add_query_prefix is not None:
            changes["add_query_prefix"] = add_query_prefix
        if strict_encoding is not None:
            changes["strict_encoding"] = strict_encoding
        return dataclasses.replace(self, **changes)
