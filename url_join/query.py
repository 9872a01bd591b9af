"""Query-string extraction, encoding and merging."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from url_join.constants import (
    QUERY_KEY_VALUE_SEPARATOR,
    QUERY_MARK,
    QUERY_PAIR_SEPARATOR,
    QUERY_SAFE_CHARS,
)
from url_join.models import QueryParams, is_absent
from url_join.segments import format_value


def encode_component(value: Any) -> str:
    """Percent-encode like encodeURIComponent (space becomes %20, not +)."""
    return quote(format_value(value), safe=QUERY_SAFE_CHARS)


def stringify_query(query: QueryParams) -> str:
    """Build ``?k=v&k=v`` from a mapping, or ``""`` when nothing survives.

    Sequence values (lists/tuples) repeat the key once per element. Absent
    values, and absent elements inside sequences, are skipped.
    """
    params = []
    for key, value in query.items():
        if is_absent(value):
            continue
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            if is_absent(item):
                continue
            params.append(
                f"{encode_component(key)}{QUERY_KEY_VALUE_SEPARATOR}{encode_component(item)}"
            )

    if not params:
        return ""
    return QUERY_MARK + QUERY_PAIR_SEPARATOR.join(params)


def extract_query(url: str) -> tuple[str, str]:
    """Split ``url`` at its first '?' into (path, query-with-'?')."""
    index = url.find(QUERY_MARK)
    if index == -1:
        return url, ""
    return url[:index], url[index:]


def merge_query(existing: str, new: str) -> str:
    """Append a freshly built query after an existing one, existing first."""
    if not new:
        return existing
    if not existing:
        return new
    return existing + QUERY_PAIR_SEPARATOR + new[len(QUERY_MARK):]


def build_query(existing: str, query: Mapping[str, Any] | None) -> str:
    if not query:
        return existing
    return merge_query(existing, stringify_query(query))
