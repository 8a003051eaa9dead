"""Parsing helpers for user-entered quantity values."""

import math
import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(raw: Any) -> int:
    """
    Parses the leading integer of a raw value the way the admin forms store it.

    Strings are read up to the first non-digit ("7abc" -> 7, "3.9" -> 3), slashes
    added by form escaping are stripped, and anything unparseable becomes 0.
    Infinite and NaN floats are unparseable.
    """
    if raw is None:
        return 0
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0

    text = str(raw).replace("\\", "")
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return int(match.group(1))


def validate_number(raw: Any) -> Optional[int]:
    """Returns a positive quantity, or None for zero, negative and unparseable input."""
    number = parse_leading_int(raw)
    if number <= 0:
        return None
    return number


def parse_priority(raw: Any) -> Optional[int]:
    """Priorities keep zero and negatives; only blank or non-numeric input is unset."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, float) and not math.isfinite(raw):
        return None
    if isinstance(raw, (int, float)):
        return int(raw)

    match = _LEADING_INT.match(str(raw).replace("\\", ""))
    if not match:
        return None
    return int(match.group(1))
