"""Type-check helpers."""

from typing import Any


def is_plain_object(value: Any) -> bool:
    """True for dict instances (JSON objects)."""
    return isinstance(value, dict)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """True for ints and floats, but not for booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_nil(value: Any) -> bool:
    return value is None
