"""Tests for trend classification."""

from metrics_report.metrics.history import HistorySnapshot
from metrics_report.metrics.trend import (
    BAD,
    DECREASED,
    EMPTY_TREND,
    EQUAL,
    GOOD,
    INCREASED,
    NEUTRAL,
    TrendCalculator,
    classify,
)


class TestClassify:
    def test_lower_is_better_decrease_is_good(self):
        result = classify(10, 7, lower_is_better=True)
        assert result.direction == DECREASED
        assert result.outcome == GOOD
        assert result.delta == -3
        assert result.delta_label == "-3"
        assert result.previous_value == 10

    def test_higher_is_better_increase_is_good(self):
        result = classify(10, 13, lower_is_better=False)
        assert result.direction == INCREASED
        assert result.outcome == GOOD
        assert result.delta_label == "+3"

    def test_lower_is_better_increase_is_bad(self):
        assert classify(10, 13, lower_is_better=True).outcome == BAD

    def test_higher_is_better_decrease_is_bad(self):
        assert classify(10, 7).outcome == BAD

    def test_equal_is_neutral(self):
        for lower_is_better in (True, False):
            result = classify(10, 10, lower_is_better)
            assert result.direction == EQUAL
            assert result.outcome == NEUTRAL
            assert result.delta_label == "0"

    def test_float_delta_is_rounded(self):
        result = classify(0.1, 0.3)
        assert result.delta == 0.2
        assert result.delta_label == "+0.2"

    def test_css_codes(self):
        assert classify(1, 0).code == "lt"
        assert classify(1, 1).code == "eq"
        assert classify(1, 2).code == "gt"


def _history(**sums):
    return [
        HistorySnapshot(sequence=1, avg={"ccn": 1}, sum={"loc": 1}),
        HistorySnapshot(sequence=2, avg={"ccn": 5}, sum=dict(sums)),
    ]


class TestCalculator:
    def test_compares_with_latest_snapshot(self):
        calc = TrendCalculator({"sum": {"loc": 7}, "avg": {}}, _history(loc=10))
        result = calc.trend("sum", "loc", True)
        assert result.outcome == GOOD
        assert result.delta_label == "-3"

    def test_no_history_is_empty(self):
        calc = TrendCalculator({"sum": {"loc": 7}, "avg": {}}, [])
        result = calc.trend("sum", "loc")
        assert result is EMPTY_TREND
        assert not result
        assert result.delta_label == ""

    def test_missing_key_is_empty(self):
        calc = TrendCalculator({"sum": {"loc": 7}, "avg": {}}, _history(loc=10))
        assert calc.trend("sum", "nb_classes").is_empty
        assert calc.trend("avg", "unknown").is_empty

    def test_disabled_never_compares(self):
        calc = TrendCalculator({"sum": {"loc": 7}, "avg": {}}, _history(loc=10), enabled=False)
        assert calc.trend("sum", "loc", True) is EMPTY_TREND

    def test_dotted_key(self):
        calc = TrendCalculator(
            {"sum": {"violations": {"total": 2}}, "avg": {}},
            _history(violations={"total": 5}),
        )
        result = calc.trend("sum", "violations.total", True)
        assert result.outcome == GOOD
        assert result.delta == -3

    def test_missing_current_value_counts_as_zero(self):
        calc = TrendCalculator({"sum": {}, "avg": {}}, _history(loc=4))
        assert calc.trend("sum", "loc").delta_label == "-4"
