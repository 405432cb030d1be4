"""
Unit tests for single-value status bar composition.
"""
import pytest

from services.ranges.models import Band, MarkerVisibility
from services.ranges.status_bar import build_status_bar


class TestBuildStatusBar:

    def test_segments_in_ascending_order(self, low_ok_high_bands):
        bar = build_status_bar(list(reversed(low_ok_high_bands)), 150, "Ok")
        assert [s.band.status for s in bar.segments] == ["Low", "Ok", "High"]
        assert [s.range_text for s in bar.segments] == ["< 100", "100 - 200", "> 200"]

    def test_equal_widths(self, low_ok_high_bands):
        bar = build_status_bar(low_ok_high_bands, 150, "Ok")
        assert all(s.width_percent == pytest.approx(100 / 3) for s in bar.segments)

    def test_marker_on_matching_segment_only(self, low_ok_high_bands):
        bar = build_status_bar(low_ok_high_bands, 150, "Ok", unit="mg/dL")
        assert [s.visibility for s in bar.segments] == [
            MarkerVisibility.NONE, MarkerVisibility.UNIQUE, MarkerVisibility.NONE,
        ]
        assert len(bar.markers) == 1
        marker = bar.markers[0]
        assert marker.left_percent == pytest.approx(47)
        assert marker.value_text == "150"
        assert marker.unit == "mg/dL"
        assert marker.label_offset == pytest.approx(-(3 + 5) * 6.3)
        assert bar.band.status == "Ok"

    def test_marker_on_first_segment_keeps_label_aligned(self, low_ok_high_bands):
        bar = build_status_bar(low_ok_high_bands, 50, "Low")
        assert bar.segments[0].marker is not None
        assert bar.segments[0].marker.label_offset == 0.0
        assert bar.segments[0].marker.left_percent == 5

    def test_repeated_status_marks_containing_band(self, vitamin_d_bands):
        bar = build_status_bar(vitamin_d_bands, 80, "Ok")
        marked = [s.label for s in bar.segments if s.marker is not None]
        assert marked == ["High"]

    def test_gradients_follow_segments(self, low_ok_high_bands):
        bar = build_status_bar(low_ok_high_bands, 150, "Ok")
        assert bar.segments[0].gradient.to_css() == "linear-gradient(to right, #FBAD37 80%, #D8D800 100%)"
        assert bar.segments[-1].gradient.is_solid

    def test_labels_carried(self):
        bands = [Band(low=None, high=5.6, status="HealthyRange", label="Normal")]
        bar = build_status_bar(bands, 5.1, "HealthyRange")
        assert bar.segments[0].label == "Normal"
        assert bar.segments[0].marker.value_text == "5.1"

    def test_no_value(self, low_ok_high_bands):
        bar = build_status_bar(low_ok_high_bands, None, "Ok")
        ok = bar.segments[1]
        assert ok.marker is not None
        assert ok.marker.left_percent == 50
        assert ok.marker.value_text == ""
        assert bar.band is None

    def test_no_status_shows_no_marker(self, low_ok_high_bands):
        bar = build_status_bar(low_ok_high_bands, 150, None)
        assert bar.markers == []

    def test_empty_bandset(self):
        bar = build_status_bar([], 150, "Ok")
        assert bar.segments == []
        assert bar.band is None
