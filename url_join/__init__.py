"""Join URL segments into a single normalized URL string."""

from url_join.joiner import join, split_options, url_join
from url_join.logging_config import configure_logging
from url_join.models import (
    UNDEFINED,
    QueryParams,
    QueryValue,
    UrlJoinOptions,
    UrlJoinOptionsDict,
    UrlSegment,
)
from url_join.query import extract_query, merge_query, stringify_query
from url_join.segments import collapse_slashes, normalize_segment, split_protocol

__version__ = "1.2.0"

__all__ = [
    "UNDEFINED",
    "QueryParams",
    "QueryValue",
    "UrlJoinOptions",
    "UrlJoinOptionsDict",
    "UrlSegment",
    "collapse_slashes",
    "configure_logging",
    "extract_query",
    "join",
    "merge_query",
    "normalize_segment",
    "split_options",
    "split_protocol",
    "stringify_query",
    "url_join",
]
