"""
Tests for the shared status color table.

Tests cover:
- Exact-match lookups for every documented label
- Override and fallback behavior
- Validation of malformed tables (build_color_table only; no file access)
"""
import pytest

from core.status_colors import build_color_table, fallback_color, known_statuses, resolve_color


# =============================================================================
# TESTS: resolve_color
# =============================================================================

class TestResolveColor:

    @pytest.mark.parametrize("status,color", [
        ("Needs Focus", "#B2302E"),
        ("CriticalRange", "#B2302E"),
        ("DiseaseRange", "#BA5225"),
        ("Ok", "#D8D800"),
        ("BorderlineRange", "#D8D800"),
        ("Good", "#72C13B"),
        ("HealthyRange", "#72C13B"),
        ("Excellent", "#37B45E"),
        ("OptimalRange", "#37B45E"),
    ])
    def test_known_statuses(self, status, color):
        assert resolve_color(status) == color

    def test_unknown_status_uses_fallback(self):
        assert resolve_color("Something else") == "#FBAD37"
        assert resolve_color(None) == "#FBAD37"
        assert fallback_color() == "#FBAD37"

    def test_lookup_is_case_sensitive(self):
        assert resolve_color("ok") == "#FBAD37"

    def test_override_wins(self):
        assert resolve_color("Ok", "#123456") == "#123456"

    def test_empty_override_is_ignored(self):
        assert resolve_color("Ok", "") == "#D8D800"

    def test_known_statuses_is_a_copy(self):
        table = known_statuses()
        table["Ok"] = "#000000"
        assert resolve_color("Ok") == "#D8D800"


# =============================================================================
# TESTS: build_color_table
# =============================================================================

class TestBuildColorTable:

    def test_valid_table(self):
        table, fallback = build_color_table({
            'fallback_color': '#FFFFFF',
            'statuses': [{'color': '#000000', 'labels': ['A', 'B']}],
        })
        assert table == {'A': '#000000', 'B': '#000000'}
        assert fallback == '#FFFFFF'

    def test_invalid_hex_raises(self):
        with pytest.raises(ValueError, match="invalid color"):
            build_color_table({
                'fallback_color': '#FFFFFF',
                'statuses': [{'color': 'red', 'labels': ['A']}],
            })

    def test_invalid_fallback_raises(self):
        with pytest.raises(ValueError, match="fallback_color"):
            build_color_table({'fallback_color': '#FFF', 'statuses': []})

    def test_missing_labels_raises(self):
        with pytest.raises(ValueError, match="no labels"):
            build_color_table({
                'fallback_color': '#FFFFFF',
                'statuses': [{'color': '#000000'}],
            })

    def test_duplicate_label_raises(self):
        with pytest.raises(ValueError, match="more than once"):
            build_color_table({
                'fallback_color': '#FFFFFF',
                'statuses': [
                    {'color': '#000000', 'labels': ['A']},
                    {'color': '#111111', 'labels': ['A']},
                ],
            })
