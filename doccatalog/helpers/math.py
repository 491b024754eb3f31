"""Math helpers."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; an empty sequence gives 0."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def round_to(value: float, precision: int = 0) -> float:
    """Round half away from zero to ``precision`` decimal places."""
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def in_range(value: float, start: float, end: float | None = None) -> bool:
    """Check ``start <= value < end``; with one bound the range is [0, start)."""
    if end is None:
        start, end = 0, start
    if start > end:
        start, end = end, start
    return start <= value < end
