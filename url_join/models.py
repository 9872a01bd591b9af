"""Typed data models for URL joining."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, TypedDict, Union

from url_join.constants import DEFAULT_NORMALIZE, DEFAULT_TRAILING_SLASH
from url_join.logging_config import get_logger

logger = get_logger(__name__)


class _Undefined:
    """Second "no value" marker, distinct from None but treated the same."""

    _instance: Optional[_Undefined] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

UrlSegment = Union[str, int, float, None, _Undefined]
QueryValue = Union[str, int, float, bool, None, _Undefined]
QueryParams = Mapping[str, Union[QueryValue, Sequence[QueryValue]]]


def is_absent(value: Any) -> bool:
    return value is None or value is UNDEFINED


class UrlJoinOptionsDict(TypedDict, total=False):
    """Mapping form of UrlJoinOptions accepted as the last argument."""

    trailing_slash: Optional[bool]
    normalize: bool
    query: Optional[QueryParams]


# camelCase spelling accepted as well
_OPTION_KEYS = {
    "trailing_slash": "trailing_slash",
    "trailingSlash": "trailing_slash",
    "normalize": "normalize",
    "query": "query",
}


@dataclass(frozen=True)
class UrlJoinOptions:
    """Options controlling how segments are joined."""

    trailing_slash: Optional[bool] = DEFAULT_TRAILING_SLASH
    normalize: bool = DEFAULT_NORMALIZE
    query: Optional[QueryParams] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> UrlJoinOptions:
        """Create options from a plain mapping, ignoring unknown keys."""
        values: dict[str, Any] = {}
        ignored = []
        for key, value in d.items():
            field_name = _OPTION_KEYS.get(key)
            if field_name is None:
                ignored.append(key)
                continue
            values[field_name] = value

        if ignored:
            logger.debug("options_keys_ignored", keys=ignored)

        trailing_slash = values.get("trailing_slash")
        normalize = values.get("normalize")
        query = values.get("query")
        return cls(
            trailing_slash=None if is_absent(trailing_slash) else bool(trailing_slash),
            normalize=DEFAULT_NORMALIZE if is_absent(normalize) else bool(normalize),
            query=None if is_absent(query) else query,
        )

    def to_dict(self) -> UrlJoinOptionsDict:
        return {
            "trailing_slash": self.trailing_slash,
            "normalize": self.normalize,
            "query": self.query,
        }
