"""
BandSet normalization - the one sort order shared by every renderer.

Bands sort ascending by lower bound (open/malformed = -inf), then by upper
bound (open/malformed = +inf). Python's sort is stable, so bands with equal
keys keep their input order. The caller's sequence is never mutated.
"""

import math
from typing import Iterable, List, Tuple

from services.ranges.models import Band


def band_sort_key(band: Band) -> Tuple[float, float]:
    low = band.low_value
    high = band.high_value
    return (
        -math.inf if low is None else low,
        math.inf if high is None else high,
    )


def normalize_bands(bands: Iterable[Band]) -> List[Band]:
    """Return a new list of bands in canonical ascending order."""
    if not bands:
        return []
    return sorted(bands, key=band_sort_key)


def descending_bands(bands: Iterable[Band]) -> List[Band]:
    """
    Return bands highest first.

    Stacked layouts draw rows top to bottom in this order so that higher
    values render toward the top.
    """
    ordered = normalize_bands(bands)
    ordered.reverse()
    return ordered
