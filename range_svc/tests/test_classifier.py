"""
Unit tests for band classification and marker visibility.
"""
import pytest

from services.ranges.classifier import (
    band_contains,
    find_band_by_status,
    marker_visibility,
    resolve_band,
)
from services.ranges.models import Band, MarkerVisibility


# =============================================================================
# TESTS: band_contains
# =============================================================================

class TestBandContains:

    @pytest.mark.parametrize("value,expected", [
        (99.9, False),
        (100, True),
        (150, True),
        (200, True),
        (200.1, False),
    ])
    def test_closed_band_inclusive_high(self, value, expected):
        assert band_contains(Band(low=100, high=200, status="Ok"), value) is expected

    def test_exclusive_high(self):
        band = Band(low=100, high=200, status="Ok")
        assert band_contains(band, 200, high_inclusive=False) is False
        assert band_contains(band, 199.99, high_inclusive=False) is True

    def test_open_ended_bounds(self):
        assert band_contains(Band(low=None, high=100, status="Low"), -1e9) is True
        assert band_contains(Band(low=200, high=None, status="High"), 1e9) is True
        assert band_contains(Band(low=None, high=None, status="Any"), 0) is True

    def test_none_value_is_never_contained(self):
        assert band_contains(Band(low=None, high=None, status="Any"), None) is False

    def test_malformed_bound_is_open(self):
        assert band_contains(Band(low="abc", high=10, status="X"), -50) is True


# =============================================================================
# TESTS: resolve_band
# =============================================================================

class TestResolveBand:

    def test_low_ok_high_scenario(self, low_ok_high_bands):
        band = resolve_band(150, low_ok_high_bands)
        assert band is not None
        assert band.status == "Ok"

    def test_boundary_value_lands_in_lower_band_when_inclusive(self, low_ok_high_bands):
        assert resolve_band(100, low_ok_high_bands).status == "Low"
        assert resolve_band(200, low_ok_high_bands).status == "Ok"

    def test_boundary_value_lands_in_upper_band_when_exclusive(self, low_ok_high_bands):
        assert resolve_band(100, low_ok_high_bands, high_inclusive=False).status == "Ok"
        assert resolve_band(200, low_ok_high_bands, high_inclusive=False).status == "High"

    def test_input_order_does_not_matter(self, low_ok_high_bands):
        reversed_bands = list(reversed(low_ok_high_bands))
        assert resolve_band(150, reversed_bands).status == "Ok"

    def test_overlap_resolves_to_first_in_ascending_order(self):
        bands = [
            Band(low=50, high=150, status="Later"),
            Band(low=0, high=100, status="Earlier"),
        ]
        assert resolve_band(75, bands).status == "Earlier"

    def test_empty_bandset(self):
        assert resolve_band(5, []) is None

    def test_none_value(self, low_ok_high_bands):
        assert resolve_band(None, low_ok_high_bands) is None

    def test_gap_returns_none(self):
        bands = [Band(low=0, high=10, status="A"), Band(low=20, high=30, status="B")]
        assert resolve_band(15, bands) is None


# =============================================================================
# TESTS: find_band_by_status
# =============================================================================

class TestFindBandByStatus:

    def test_case_insensitive(self, low_ok_high_bands):
        assert find_band_by_status("ok", low_ok_high_bands).status == "Ok"

    def test_first_match(self, vitamin_d_bands):
        band = find_band_by_status("Ok", vitamin_d_bands)
        assert band.label == "Insufficient"

    def test_unknown_or_missing_status(self, low_ok_high_bands):
        assert find_band_by_status("Borderline", low_ok_high_bands) is None
        assert find_band_by_status(None, low_ok_high_bands) is None
        assert find_band_by_status("", low_ok_high_bands) is None


# =============================================================================
# TESTS: marker_visibility
# =============================================================================

class TestMarkerVisibility:

    @pytest.mark.parametrize("value", [-1000, 0, 5, 1e6, None])
    def test_single_band_is_unique_for_any_value(self, value):
        band = Band(low=0, high=10, status="X")
        assert marker_visibility(band, "X", value, [band]) == MarkerVisibility.UNIQUE

    def test_two_disjoint_bands_with_same_status(self):
        first = Band(low=0, high=10, status="X")
        second = Band(low=20, high=30, status="X")
        bands = [first, second]
        assert marker_visibility(first, "X", 5, bands) == MarkerVisibility.IN_RANGE
        assert marker_visibility(second, "X", 5, bands) == MarkerVisibility.NONE

    def test_unique_status_on_other_band(self, low_ok_high_bands):
        low, ok, high = low_ok_high_bands
        assert marker_visibility(ok, "Ok", 150, low_ok_high_bands) == MarkerVisibility.UNIQUE
        assert marker_visibility(low, "Ok", 150, low_ok_high_bands) == MarkerVisibility.NONE

    def test_unique_status_trusts_label_over_value(self, low_ok_high_bands):
        ok = low_ok_high_bands[1]
        assert marker_visibility(ok, "Ok", 999, low_ok_high_bands) == MarkerVisibility.UNIQUE

    def test_status_is_case_sensitive(self, low_ok_high_bands):
        ok = low_ok_high_bands[1]
        assert marker_visibility(ok, "ok", 150, low_ok_high_bands) == MarkerVisibility.NONE

    def test_repeated_status_on_vitamin_d_scale(self, vitamin_d_bands):
        insufficient = next(b for b in vitamin_d_bands if b.label == "Insufficient")
        high = next(b for b in vitamin_d_bands if b.label == "High")
        assert marker_visibility(insufficient, "Ok", 25, vitamin_d_bands) == MarkerVisibility.IN_RANGE
        assert marker_visibility(high, "Ok", 25, vitamin_d_bands) == MarkerVisibility.NONE
        assert marker_visibility(high, "Ok", 80, vitamin_d_bands) == MarkerVisibility.IN_RANGE

    def test_none_cases(self, low_ok_high_bands):
        ok = low_ok_high_bands[1]
        assert marker_visibility(ok, "Ok", 150, []) == MarkerVisibility.NONE
        assert marker_visibility(ok, None, 150, low_ok_high_bands) == MarkerVisibility.NONE
        assert marker_visibility(None, "Ok", 150, low_ok_high_bands) == MarkerVisibility.NONE
        assert marker_visibility(ok, "Unknown", 150, low_ok_high_bands) == MarkerVisibility.NONE

    def test_visible_property(self):
        assert MarkerVisibility.UNIQUE.visible
        assert MarkerVisibility.IN_RANGE.visible
        assert not MarkerVisibility.NONE.visible

    def test_wire_values(self):
        assert MarkerVisibility.IN_RANGE.value == "inRange"
        assert MarkerVisibility("unique") is MarkerVisibility.UNIQUE
