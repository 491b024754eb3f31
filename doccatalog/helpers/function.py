"""Function helpers."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def memoize(func: F) -> F:
    """Cache results by positional arguments (which must be hashable)."""
    cache: dict[tuple[Any, ...], Any] = {}

    @functools.wraps(func)
    def wrapper(*args: Any) -> Any:
        if args not in cache:
            cache[args] = func(*args)
        return cache[args]

    wrapper.cache = cache  # type: ignore[attr-defined]
    return wrapper  # type: ignore[return-value]


def once(func: F) -> F:
    """Run ``func`` on the first call only; later calls return that result."""
    result: list[Any] = []

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not result:
            result.append(func(*args, **kwargs))
        return result[0]

    return wrapper  # type: ignore[return-value]
