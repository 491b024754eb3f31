"""Number helpers."""

import re
from typing import Any

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def to_number(value: Any) -> Any:
    """Parse a leading integer out of a string, or return the value unchanged.

    Lists and dicts are converted element by element. Booleans are left alone.
    """
    if isinstance(value, list):
        return [to_number(v) for v in value]
    if isinstance(value, dict):
        return {k: to_number(v) for k, v in value.items()}
    if isinstance(value, str):
        m = _LEADING_INT_RE.match(value)
        return int(m.group(1)) if m else value
    return value


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into the inclusive range [lower, upper]."""
    if lower > upper:
        lower, upper = upper, lower
    return max(lower, min(upper, value))
