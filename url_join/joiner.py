from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from url_join.constants import PATH_SEPARATOR, PROTOCOL_DELIMITER
from url_join.models import UrlJoinOptions, UrlSegment
from url_join.query import build_query, extract_query
from url_join.segments import (
    collapse_slashes,
    format_value,
    is_valid_segment,
    normalize_segment,
    split_protocol,
)

OptionsArg = Union[UrlJoinOptions, Mapping[str, Any]]


def split_options(
    args: tuple[Any, ...],
) -> tuple[list[UrlSegment], UrlJoinOptions]:
    """Separate a trailing options record from the path segments.

    Only the last argument may carry options, either as UrlJoinOptions or
    as a plain mapping.
    """
    if args:
        last = args[-1]
        if isinstance(last, UrlJoinOptions):
            return list(args[:-1]), last
        if isinstance(last, Mapping):
            return list(args[:-1]), UrlJoinOptions.from_dict(last)
    return list(args), UrlJoinOptions()


def _apply_trailing_slash(url: str, trailing_slash: bool | None) -> str:
    if trailing_slash and not url.endswith(PATH_SEPARATOR):
        return url + PATH_SEPARATOR
    if trailing_slash is False and url.endswith(PATH_SEPARATOR) and len(url) > 1:
        return url[:-1]
    return url


def url_join(*args: Union[UrlSegment, OptionsArg]) -> str:
    """Join URL segments, dropping None/UNDEFINED/empty values.

    The last argument may be a UrlJoinOptions or a mapping with
    ``trailing_slash``, ``normalize`` and ``query`` keys.

    >>> url_join("https://api.example.com", "v1", "users", 123)
    'https://api.example.com/v1/users/123'
    >>> url_join("api", None, "users", None, "profile")
    'api/users/profile'
    >>> url_join("/api/", "/users/", {"trailing_slash": True})
    '/api/users/'
    >>> url_join("api", "users", {"query": {"page": 1, "limit": 10}})
    'api/users?page=1&limit=10'
    >>> url_join("api/users?sort=name", {"query": {"page": 1}})
    'api/users?sort=name&page=1'
    """
    segments, options = split_options(args)

    if len(segments) == 1 and segments[0] == PATH_SEPARATOR:
        return "" if options.trailing_slash is False else PATH_SEPARATOR

    valid = [s for s in segments if is_valid_segment(s)]
    normalized = [n for n in (normalize_segment(s) for s in valid) if n]
    if not normalized:
        return ""

    # Only the first embedded query is kept; later ones are dropped from the path
    existing_query = ""
    cleaned = []
    for segment in normalized:
        path, query = extract_query(segment)
        if query and not existing_query:
            existing_query = query
        cleaned.append(path)

    result = PATH_SEPARATOR.join(cleaned)

    first = format_value(valid[0])
    if PROTOCOL_DELIMITER in first:
        protocol, rest = split_protocol(first)
        if protocol:
            rest_path, _ = extract_query(rest)
            result = protocol + PATH_SEPARATOR.join(
                [normalize_segment(rest_path), *cleaned[1:]]
            )
    elif first.startswith(PATH_SEPARATOR):
        result = PATH_SEPARATOR + result

    if options.normalize is not False:
        result = collapse_slashes(result)

    result = _apply_trailing_slash(result, options.trailing_slash)

    return result + build_query(existing_query, options.query)


join = url_join
