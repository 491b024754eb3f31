"""Array helpers: chunking, deduplication, grouping and sorting."""

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split a sequence into lists of at most ``size`` elements."""
    if size < 1:
        msg = f"chunk size must be positive, got {size}"
        raise ValueError(msg)
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def uniq(items: Iterable[T]) -> list[T]:
    """Return the items with duplicates removed, keeping first occurrences."""
    seen: set[Any] = set()
    out: list[T] = []
    for item in items:
        key = _hashable(item)
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out


def group_by(
    items: Iterable[T], key: Callable[[T], Hashable]
) -> dict[Hashable, list[T]]:
    """Group items into lists keyed by ``key(item)``, in first-seen order."""
    groups: dict[Hashable, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def sort_by(
    items: Iterable[T], key: Callable[[T], Any], *, ascending: bool = True
) -> list[T]:
    """Return a new list sorted by ``key``. The sort is stable."""
    return sorted(items, key=key, reverse=not ascending)


def last(items: Sequence[T], default: T | None = None) -> T | None:
    """Return the last element, or ``default`` for an empty sequence."""
    return items[-1] if items else default


def _hashable(value: Any) -> Any:
    # Lists and dicts compare by content, like JSON.stringify in the JS library.
    if isinstance(value, list):
        return ("__list__", tuple(_hashable(v) for v in value))
    if isinstance(value, dict):
        return (
            "__dict__",
            tuple(sorted((k, _hashable(v)) for k, v in value.items())),
        )
    return value
