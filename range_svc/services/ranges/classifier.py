"""
Band classification and marker visibility.

Containment is `(low absent OR value >= low) AND (high absent OR value <= high)`.
The upper test becomes `value < high` when high_inclusive is False. When
overlapping bands both contain a value, the first band in ascending
normalized order wins.
"""

import logging
from typing import Optional, Sequence

from services.ranges.models import Band, MarkerVisibility
from services.ranges.normalizer import normalize_bands

logger = logging.getLogger(__name__)


def band_contains(band: Band, value: Optional[float], high_inclusive: bool = True) -> bool:
    """Check whether a value lies inside a band."""
    if value is None:
        return False
    low = band.low_value
    high = band.high_value
    if low is not None and value < low:
        return False
    if high is not None:
        if high_inclusive:
            return value <= high
        return value < high
    return True


def resolve_band(
    value: Optional[float],
    bands: Sequence[Band],
    high_inclusive: bool = True,
) -> Optional[Band]:
    """
    Find the band containing a value.

    Args:
        value: The measured value
        bands: BandSet in any order
        high_inclusive: Whether a value equal to `high` belongs to the band

    Returns:
        The first matching band in ascending order, or None when the BandSet
        is empty, the value is missing, or no band contains it.
    """
    if value is None or not bands:
        return None
    for band in normalize_bands(bands):
        if band_contains(band, value, high_inclusive):
            return band
    logger.debug("Value outside every band", extra={'value': value, 'bands': len(bands)})
    return None


def find_band_by_status(status: Optional[str], bands: Sequence[Band]) -> Optional[Band]:
    """First band whose status matches, ignoring case."""
    if not status:
        return None
    wanted = status.lower()
    for band in bands:
        if band.status and band.status.lower() == wanted:
            return band
    return None


def marker_visibility(
    band: Optional[Band],
    status: Optional[str],
    value: Optional[float],
    bands: Sequence[Band],
    high_inclusive: bool = True,
) -> MarkerVisibility:
    """
    Decide whether `band` shows the marker for a value with a given status.

    A status label can recur across disjoint bands ("Ok" below and above the
    optimal band). When the label is globally unique the value is trusted
    without re-checking the range; when it repeats, the band must also
    contain the value.
    """
    if band is None or not status or not bands:
        return MarkerVisibility.NONE

    same_status = [b for b in bands if b.status == status]
    if len(same_status) == 1:
        if same_status[0] == band:
            return MarkerVisibility.UNIQUE
        return MarkerVisibility.NONE

    if len(same_status) > 1 and band.status == status and band_contains(band, value, high_inclusive):
        return MarkerVisibility.IN_RANGE
    return MarkerVisibility.NONE
