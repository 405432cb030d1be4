"""
Human-readable range strings.

Usage:
    format_range(None, 100)   # "< 100"
    format_range(50, None)    # "> 50"
    format_range(50, "50.0")  # "50"
    format_range(10, 20)      # "10 - 20"
    format_range(None, None)  # ""
"""

import math
from typing import Optional

from services.ranges.models import Band, RawBound, parse_bound


def format_number(value: float) -> str:
    """Shortest text form of a number: 50.0 -> "50", 0.25 -> "0.25"."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _as_number(text: Optional[str]) -> Optional[float]:
    return parse_bound(text)


def _normalize(raw: RawBound) -> Optional[str]:
    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if isinstance(raw, float) and math.isnan(raw):
            return None
        return format_number(float(raw))
    text = str(raw).strip()
    return text or None


def format_range(low: RawBound, high: RawBound) -> str:
    """Render a (low, high) bound pair as a display string."""
    low_text = _normalize(low)
    high_text = _normalize(high)

    if low_text is not None and high_text is not None:
        low_num = _as_number(low_text)
        high_num = _as_number(high_text)
        if low_num is not None and high_num is not None:
            if low_num == high_num:
                return format_number(low_num)
        elif low_text.lower() == high_text.lower():
            return low_text
        return f"{low_text} - {high_text}"

    if high_text is not None:
        return f"< {high_text}"
    if low_text is not None:
        return f"> {low_text}"
    return ""


def format_band_range(band: Band) -> str:
    return format_range(band.low, band.high)


def row_edge_label(band: Band) -> str:
    """Caption at the right edge of a stacked row: the upper bound, else "low<"."""
    high_text = _normalize(band.high)
    if high_text is not None:
        return high_text
    low_text = _normalize(band.low)
    if low_text is not None:
        return f"{low_text}<"
    return ""
