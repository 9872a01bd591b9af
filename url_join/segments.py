from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from url_join.constants import PATH_SEPARATOR, PROTOCOL_PATTERN
from url_join.logging_config import get_logger
from url_join.models import is_absent

logger = get_logger(__name__)


def format_value(value: Any) -> str:
    """Render a segment or query value as text.

    Numbers follow JavaScript's String(): integral floats drop the ".0",
    non-finite floats become NaN/Infinity, booleans are lowercase.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _format_float(value)
    logger.debug("segment_coerced", type=type(value).__name__)
    return str(value)


def _format_float(value: float) -> str:
    """Shortest round-trip digits laid out like JavaScript's Number#toString."""
    if value == 0:
        return "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    # value == 0.<digits> * 10**n
    n = k + exponent
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def is_valid_segment(segment: Any) -> bool:
    return not is_absent(segment) and segment != ""


def normalize_segment(segment: Any) -> str:
    """Render a segment and strip every leading and trailing slash."""
    return format_value(segment).strip(PATH_SEPARATOR)


def collapse_slashes(url: str) -> str:
    """Collapse runs of two or more slashes to one, unless preceded by ':'.

    Equivalent to a global replace of ``([^:])//+`` with ``\\1/``: matches are
    found left to right and never overlap, so "https://" survives while
    "a:///b" style runs after a non-colon character are squeezed.
    """
    out = []
    i = 0
    n = len(url)
    while i < n:
        ch = url[i]
        if (
            ch != ":"
            and i + 2 < n
            and url[i + 1] == PATH_SEPARATOR
            and url[i + 2] == PATH_SEPARATOR
        ):
            out.append(ch)
            out.append(PATH_SEPARATOR)
            i += 1
            while i < n and url[i] == PATH_SEPARATOR:
                i += 1
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def split_protocol(text: str) -> tuple[str, str]:
    """Split a leading ``scheme://`` prefix off ``text``.

    Returns ``("", text)`` when there is no valid prefix.
    """
    match = PROTOCOL_PATTERN.match(text)
    if match is None:
        return "", text
    protocol = match.group(0)
    return protocol, text[len(protocol):]
