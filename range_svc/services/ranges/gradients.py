"""
Boundary gradients between adjacent bands.

Each segment keeps its own color for the first 80% and blends into the next
band's color over the final fifth. The last segment is solid.
"""

from typing import List, Optional, Sequence

from core.status_colors import resolve_color
from services.ranges.models import Band, BandGradient, GradientStop
from services.ranges.normalizer import normalize_bands

BLEND_START = 80.0
BLEND_END = 100.0


def band_color(band: Band) -> str:
    return resolve_color(band.status, band.color)


def segment_gradient(current: Band, following: Optional[Band] = None) -> BandGradient:
    if following is None:
        return BandGradient(band=current, stops=(GradientStop(band_color(current), BLEND_END),))
    return BandGradient(
        band=current,
        stops=(
            GradientStop(band_color(current), BLEND_START),
            GradientStop(band_color(following), BLEND_END),
        ),
    )


def compose_gradients(bands: Sequence[Band]) -> List[BandGradient]:
    """Build one gradient per band, in ascending normalized order."""
    ordered = normalize_bands(bands)
    gradients: List[BandGradient] = []
    for index, band in enumerate(ordered):
        following = ordered[index + 1] if index + 1 < len(ordered) else None
        gradients.append(segment_gradient(band, following))
    return gradients
