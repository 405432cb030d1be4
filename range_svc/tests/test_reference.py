"""
Unit tests for min/max reference range helpers.
"""
import pytest

from services.ranges.reference import (
    HIGH,
    LINE_COLOR_IN_RANGE,
    LINE_COLOR_NO_RANGE,
    LINE_COLOR_OUT_OF_RANGE,
    LOW,
    NORMAL,
    reference_progress,
    reference_status,
    trend_line_color,
)


class TestReferenceStatus:

    @pytest.mark.parametrize("value,expected", [
        (5, LOW),
        (10, NORMAL),
        (25, NORMAL),
        (40, NORMAL),
        (41, HIGH),
    ])
    def test_classification(self, value, expected):
        assert reference_status(value, 10, 40) == expected

    def test_missing_bound_is_normal(self):
        assert reference_status(1000, None, 40) == NORMAL
        assert reference_status(-1000, 10, None) == NORMAL


class TestReferenceProgress:

    def test_midpoint(self):
        assert reference_progress(25, 10, 40) == pytest.approx(50)

    def test_clamped(self):
        assert reference_progress(0, 10, 40) == 0
        assert reference_progress(100, 10, 40) == 100

    def test_degenerate_ranges(self):
        assert reference_progress(5, None, 40) == 50
        assert reference_progress(5, 5, 5) == 50


class TestTrendLineColor:

    def test_colors(self):
        assert trend_line_color(25, 10, 40) == LINE_COLOR_IN_RANGE == "#10B981"
        assert trend_line_color(50, 10, 40) == LINE_COLOR_OUT_OF_RANGE == "#EF4444"
        assert trend_line_color(None, 10, 40) == LINE_COLOR_NO_RANGE == "#3B82F6"
        assert trend_line_color(25, None, None) == LINE_COLOR_NO_RANGE
