"""Trend indicators: current value versus the most recent snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from .history import HistorySnapshot, get_latest_snapshot


DECREASED = "decreased"
EQUAL = "equal"
INCREASED = "increased"

GOOD = "good"
NEUTRAL = "neutral"
BAD = "bad"

# CSS codes used by the templates
_CODES = {DECREASED: "lt", EQUAL: "eq", INCREASED: "gt"}


@dataclass(frozen=True)
class TrendResult:
    direction: Optional[str] = None
    outcome: str = NEUTRAL
    delta: float = 0
    previous_value: Any = None

    @property
    def is_empty(self) -> bool:
        return self.direction is None

    @property
    def code(self) -> str:
        return _CODES.get(self.direction, "")

    @property
    def delta_label(self) -> str:
        """Signed delta, e.g. ``+3``, ``-3`` or ``0``."""
        if self.is_empty:
            return ""
        text = _format_number(self.delta)
        return f"+{text}" if self.delta > 0 else text

    def __bool__(self) -> bool:
        return not self.is_empty


EMPTY_TREND = TrendResult()


def classify(previous: float, current: float, lower_is_better: bool = False) -> TrendResult:
    """Compare *current* with *previous*."""
    delta = current - previous
    if isinstance(delta, float):
        delta = round(delta, 2)

    cmp = (current > previous) - (current < previous)
    if cmp < 0:
        direction = DECREASED
        outcome = GOOD if lower_is_better else BAD
    elif cmp > 0:
        direction = INCREASED
        outcome = BAD if lower_is_better else GOOD
    else:
        direction = EQUAL
        outcome = NEUTRAL

    return TrendResult(
        direction=direction,
        outcome=outcome,
        delta=delta,
        previous_value=previous,
    )


class TrendCalculator:
    """Answers trend queries for one rendering scope.

    Only the global scope has a trend; a disabled calculator returns
    :data:`EMPTY_TREND` without looking at the history.
    """

    def __init__(
        self,
        current: Mapping[str, Mapping[str, Any]],
        history: List[HistorySnapshot],
        enabled: bool = True,
    ):
        self._current = current
        self._latest = get_latest_snapshot(history) if enabled else None
        self.enabled = enabled

    def trend(self, kind: str, key: str, lower_is_better: bool = False) -> TrendResult:
        if not self.enabled or self._latest is None:
            return EMPTY_TREND

        previous = _lookup(getattr(self._latest, kind, None), key)
        if not _is_number(previous):
            return EMPTY_TREND
        current = _lookup(self._current.get(kind), key)
        if current is None:
            current = 0
        if not _is_number(current):
            return EMPTY_TREND

        return classify(previous, current, lower_is_better)

    __call__ = trend


def _lookup(data: Optional[Mapping[str, Any]], key: str) -> Any:
    """Resolve a dotted *key* such as ``violations.total``."""
    value: Any = data
    for part in key.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return None
        value = value[part]
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
