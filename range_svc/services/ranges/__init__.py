"""
Range engine: band normalization, classification, positioning, colors and
chart geometry for biomarker reference scales.

Import directly from submodules for the less common helpers:
- from services.ranges.reference import reference_status
- from services.ranges.plotly_builder import RangePlotlyBuilder
"""
from services.ranges.classifier import (
    band_contains,
    find_band_by_status,
    marker_visibility,
    resolve_band,
)
from services.ranges.formatter import format_band_range, format_number, format_range, row_edge_label
from services.ranges.gradients import band_color, compose_gradients
from services.ranges.models import (
    Band,
    BandGradient,
    Connector,
    GradientStop,
    MarkerVisibility,
    PositionedPoint,
    Sample,
    StatusBar,
    StatusBarSegment,
    StatusMarker,
    TrendPath,
    TrendPoint,
    parse_bound,
)
from services.ranges.normalizer import descending_bands, normalize_bands
from services.ranges.positions import horizontal_percent, marker_label_offset, vertical_center
from services.ranges.status_bar import build_status_bar
from services.ranges.trend_path import TrendLayout, build_trend_path

__all__ = [
    # Records
    "Band",
    "BandGradient",
    "Connector",
    "GradientStop",
    "MarkerVisibility",
    "PositionedPoint",
    "Sample",
    "StatusBar",
    "StatusBarSegment",
    "StatusMarker",
    "TrendLayout",
    "TrendPath",
    "TrendPoint",
    "parse_bound",
    # Operations
    "band_color",
    "band_contains",
    "build_status_bar",
    "build_trend_path",
    "compose_gradients",
    "descending_bands",
    "find_band_by_status",
    "format_band_range",
    "format_number",
    "format_range",
    "horizontal_percent",
    "marker_label_offset",
    "marker_visibility",
    "normalize_bands",
    "resolve_band",
    "row_edge_label",
    "vertical_center",
]
