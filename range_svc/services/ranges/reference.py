"""
Helpers for plain min/max reference ranges attached to lab results.

Lab-result records carry an optional reference_min/reference_max pair
rather than a full BandSet. These helpers classify and position values
against such a pair.
"""

from typing import Optional

LOW = "low"
NORMAL = "normal"
HIGH = "high"

LINE_COLOR_NO_RANGE = "#3B82F6"
LINE_COLOR_IN_RANGE = "#10B981"
LINE_COLOR_OUT_OF_RANGE = "#EF4444"


def reference_status(
    value: float,
    reference_min: Optional[float],
    reference_max: Optional[float],
) -> str:
    """Classify a value as low/normal/high. Missing bounds count as normal."""
    if reference_min is None or reference_max is None:
        return NORMAL
    if value < reference_min:
        return LOW
    if value > reference_max:
        return HIGH
    return NORMAL


def reference_progress(
    value: float,
    reference_min: Optional[float],
    reference_max: Optional[float],
) -> float:
    """Position of a value across the reference range, clamped to [0, 100]."""
    if reference_min is None or reference_max is None:
        return 50.0
    span = reference_max - reference_min
    if span == 0:
        return 50.0
    position = ((value - reference_min) / span) * 100
    return max(0.0, min(100.0, position))


def trend_line_color(
    latest: Optional[float],
    reference_min: Optional[float],
    reference_max: Optional[float],
) -> str:
    """Line color for a trend chart based on where the latest value sits."""
    if latest is None or reference_min is None or reference_max is None:
        return LINE_COLOR_NO_RANGE
    if reference_min <= latest <= reference_max:
        return LINE_COLOR_IN_RANGE
    return LINE_COLOR_OUT_OF_RANGE
