"""
Unit tests for range string formatting.
"""
import pytest

from services.ranges.formatter import format_band_range, format_number, format_range, row_edge_label
from services.ranges.models import Band


class TestFormatRange:

    @pytest.mark.parametrize("low,high,expected", [
        (None, None, ""),
        (None, 100, "< 100"),
        (50, None, "> 50"),
        (50, 50, "50"),
        (10, 20, "10 - 20"),
    ])
    def test_basic_cases(self, low, high, expected):
        assert format_range(low, high) == expected

    def test_equal_numeric_text_strips_trailing_zeros(self):
        assert format_range("50.000", 50) == "50"
        assert format_range(50, "50.0") == "50"

    def test_floats_keep_shortest_form(self):
        assert format_range(0.4, 4.0) == "0.4 - 4"
        assert format_range(5.7, 6.4) == "5.7 - 6.4"

    def test_empty_and_whitespace_are_absent(self):
        assert format_range("", 100) == "< 100"
        assert format_range("  ", "   ") == ""

    def test_strings_are_trimmed(self):
        assert format_range(" 10 ", " 20 ") == "10 - 20"

    def test_equal_text_bounds_case_insensitive(self):
        assert format_range("Negative", "negative") == "Negative"

    def test_text_bounds(self):
        assert format_range("trace", "positive") == "trace - positive"

    def test_zero_is_present(self):
        assert format_range(0, None) == "> 0"
        assert format_range(None, 0) == "< 0"


class TestBandHelpers:

    def test_format_band_range(self):
        assert format_band_range(Band(low=100, high=200, status="Ok")) == "100 - 200"

    def test_row_edge_label_prefers_high(self):
        assert row_edge_label(Band(low=100, high=200, status="Ok")) == "200"

    def test_row_edge_label_open_high(self):
        assert row_edge_label(Band(low=200, high=None, status="High")) == "200<"

    def test_row_edge_label_fully_open(self):
        assert row_edge_label(Band(low=None, high=None, status="X")) == ""

    def test_format_number(self):
        assert format_number(100.0) == "100"
        assert format_number(0.25) == "0.25"
        assert format_number(-3.0) == "-3"
