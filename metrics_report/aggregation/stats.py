"""Statistical utilities for aggregation."""

from __future__ import annotations

from typing import Iterable, List


def mean(values: Iterable[float], digits: int = 2) -> float:
    """Arithmetic mean of *values*, rounded; 0 for an empty input."""
    vals: List[float] = [v for v in values if v is not None]
    if not vals:
        return 0
    return round(sum(vals) / len(vals), digits)


def total(values: Iterable[float]) -> float:
    """Sum of *values*, ignoring missing entries."""
    return sum(v for v in values if v is not None)
