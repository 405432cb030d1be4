"""
Single-value status bar composition.

One equal-width segment per band in ascending order, each with its caption,
range string and boundary gradient. Segments whose visibility is `unique`
or `inRange` carry the "You: value unit" marker.
"""

import logging
from typing import List, Optional, Sequence

from services.ranges.classifier import marker_visibility, resolve_band
from services.ranges.formatter import format_band_range, format_number
from services.ranges.gradients import compose_gradients
from services.ranges.models import Band, StatusBar, StatusBarSegment, StatusMarker
from services.ranges.positions import horizontal_percent, marker_label_offset

logger = logging.getLogger(__name__)


def build_status_bar(
    bands: Sequence[Band],
    value: Optional[float],
    status: Optional[str],
    unit: str = "",
    high_inclusive: bool = True,
) -> StatusBar:
    """
    Describe the status bar for one biomarker value.

    Args:
        bands: BandSet in any order
        value: Current value (may be None when only the scale is shown)
        status: Status label reported with the value
        unit: Display unit appended to the marker label
        high_inclusive: Whether a value equal to a band's upper bound belongs to it
    """
    gradients = compose_gradients(bands)
    if not gradients:
        return StatusBar()

    width = 100.0 / len(gradients)
    value_text = format_number(float(value)) if value is not None else ""
    ordered = [g.band for g in gradients]

    segments: List[StatusBarSegment] = []
    for index, gradient in enumerate(gradients):
        band = gradient.band
        visibility = marker_visibility(band, status, value, ordered, high_inclusive)
        marker = None
        if visibility.visible:
            marker = StatusMarker(
                left_percent=horizontal_percent(value, band),
                label_offset=marker_label_offset(index, value_text, unit),
                value_text=value_text,
                unit=unit or "",
            )
        segments.append(StatusBarSegment(
            band=band,
            label=band.label or "",
            range_text=format_band_range(band),
            gradient=gradient,
            width_percent=width,
            visibility=visibility,
            marker=marker,
        ))

    if status and not any(s.marker for s in segments):
        logger.debug("No segment shows the marker", extra={'value': value, 'status': status})

    return StatusBar(segments=segments, band=resolve_band(value, ordered, high_inclusive))
