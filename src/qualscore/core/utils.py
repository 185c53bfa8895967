"""Numeric helpers shared by scorers and the validator."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable


def round_half_up(value: float, places: int = 0) -> float:
    """Round with halves away from zero, so 54.5 becomes 55 rather than 54."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def mean(values: Iterable[float]) -> float:
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def weighted_mean(pairs: Iterable[tuple[float, float]]) -> float:
    """Weighted mean of ``(value, weight)`` pairs; 0.0 when total weight is zero."""
    total = 0.0
    total_weight = 0.0
    for value, weight in pairs:
        total += value * weight
        total_weight += weight
    if total_weight == 0:
        return 0.0
    return total / total_weight
