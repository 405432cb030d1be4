"""
Position mapping for markers and stacked rows.

horizontal_percent() places a value inside its band segment and always
returns a percentage in [5, 95]. vertical_center() gives the center of a
row in a stacked layout.
"""

from typing import Optional

from services.ranges.models import Band

MIN_PERCENT = 10.0
MAX_PERCENT = 90.0
CENTER_PERCENT = 50.0
MARKER_NUDGE = 3.0
LABEL_CHAR_WIDTH = 6.3


def horizontal_percent(value: Optional[float], band: Optional[Band]) -> float:
    """
    Map a value to a percentage offset inside a band segment.

    Open-ended bands pin the marker near the edge the value falls on;
    closed bands interpolate linearly, nudged left and clamped to [10, 90].
    """
    if band is None or value is None:
        return CENTER_PERCENT

    low = band.low_value
    high = band.high_value

    if low is None and high is not None:
        return 5.0 if value <= high else 95.0
    if high is None and low is not None:
        return 90.0 if value >= low else 5.0
    if low is not None and high is not None:
        if high == low:
            return CENTER_PERCENT
        percent = ((value - low) / (high - low)) * 100 - MARKER_NUDGE
        return max(MIN_PERCENT, min(MAX_PERCENT, percent))
    return CENTER_PERCENT


def vertical_center(band_index: int, total_bands: int, axis_extent: float) -> float:
    """Center of row `band_index` when `total_bands` rows share `axis_extent`."""
    if total_bands <= 0:
        return 0.0
    row_height = axis_extent / total_bands
    return band_index * row_height + row_height / 2


def marker_label_offset(index: int, value_text: str, unit: str = "") -> float:
    """
    Horizontal nudge for the value label under a marker, in pixels.

    The first segment keeps the label left-aligned; later segments shift it
    left by the approximate rendered width of "value unit".
    """
    if index == 0:
        return 0.0
    return -(len(value_text or "") + len(unit or "")) * LABEL_CHAR_WIDTH
