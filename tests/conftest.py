"""Shared fixtures for payload-query tests."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import parse_qsl

import pytest

from payload_query import QueryBuilder, QueryStringEncoder

_PATH_RE = re.compile(r"\[([^\]]*)\]")


@pytest.fixture
def encoder() -> QueryStringEncoder:
    return QueryStringEncoder()


@pytest.fixture
def query() -> QueryBuilder:
    return QueryBuilder()


def decode_query(query_string: str) -> dict[str, Any]:
    """
    Rebuild nested data from a bracket-notation query string.

    Numeric path segments become list indices; every leaf stays a string.
    """
    root: dict[str, Any] = {}
    for raw_key, value in parse_qsl(query_string.lstrip("?"), keep_blank_values=True):
        head = raw_key.split("[", 1)[0]
        path = [head, *_PATH_RE.findall(raw_key[len(head) :])]
        node: Any = root
        for part, next_part in zip(path, path[1:]):
            key: Any = int(part) if isinstance(node, list) else part
            if isinstance(node, list):
                while len(node) <= key:
                    node.append(None)
            child = node[key] if not isinstance(node, dict) else node.get(key)
            if child is None:
                child = [] if next_part.isdigit() else {}
                node[key] = child
            node = child
        last: Any = path[-1]
        if isinstance(node, list):
            last = int(last)
            while len(node) <= last:
                node.append(None)
        node[last] = value
    return root


@pytest.fixture
def decode():
    return decode_query
