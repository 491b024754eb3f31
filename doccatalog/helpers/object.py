"""Object (mapping) helpers."""

from collections.abc import Iterable, Mapping
from typing import Any


def get(obj: Any, path: str, default: Any = None) -> Any:
    """Read a dotted ``path`` such as ``"author.name"`` from nested mappings."""
    current = obj
    for part in path.split("."):
        if isinstance(current, Mapping) and part in current:
            current = current[part]
        elif isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        else:
            return default
    return current


def pick(obj: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a new dict holding only the listed keys that exist in ``obj``."""
    return {k: obj[k] for k in keys if k in obj}


def is_empty(value: Any) -> bool:
    """Check for None, empty strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def flat(obj: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested mappings into a single level with dotted keys."""
    out: dict[str, Any] = {}
    for key, value in obj.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping) and value:
            out.update(flat(value, full_key))
        else:
            out[full_key] = value
    return out
