"""Lenient numeric parsing for SVG attribute values. No engine imports."""

from __future__ import annotations

import math
import re

# Leading decimal number: "12.5px" → 12.5, "1.2.3" → 1.2, "px" → no match
_LEADING_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NON_NUMERIC_RE = re.compile(r"[^\d.]")
_LIST_SEP_RE = re.compile(r"[\s,]+")


def leading_float(text: str | None) -> float:
    """Parse the longest numeric prefix of ``text``; NaN when there is none."""
    if text is None:
        return math.nan
    match = _LEADING_FLOAT_RE.match(str(text))
    if not match:
        return math.nan
    return float(match.group(1))


def parse_length(text: str | None) -> float:
    """Strip everything but digits and dots, then parse.

    Units and signs are discarded: "200px" → 200, "-50" → 50, "auto" → NaN.
    """
    if text is None:
        return math.nan
    return leading_float(_NON_NUMERIC_RE.sub("", str(text)))


def parse_number(text: str | None, default: float = 0.0) -> float:
    """Parse a numeric prefix, falling back to ``default`` when absent or unparsable."""
    value = leading_float(text)
    return default if math.isnan(value) else value


def parse_number_list(text: str | None) -> list[float]:
    """Split on whitespace/commas and keep only the tokens that parse."""
    if not text:
        return []
    values = (leading_float(token) for token in _LIST_SEP_RE.split(str(text)))
    return [v for v in values if not math.isnan(v)]


def is_unresolved(value: float) -> bool:
    """A dimension of 0 or NaN still needs a fallback."""
    return value == 0 or math.isnan(value)
