"""
Trend path construction for stacked historical charts.

Rows are the bands in descending order (highest band at the top). Each
sample is placed in the row of the band containing its value, one column
per sample, and consecutive samples are joined by straight dashed
connectors.

Usage:
    path = build_trend_path(series, bands, TrendLayout(axis_extent=70))
    for connector in path.connectors:
        ...
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from core.exceptions import InvalidLayoutError
from services.ranges.classifier import find_band_by_status, marker_visibility, resolve_band
from services.ranges.models import (
    Band,
    Connector,
    MarkerVisibility,
    PositionedPoint,
    Sample,
    TrendPath,
    TrendPoint,
)
from services.ranges.normalizer import descending_bands
from services.ranges.positions import vertical_center

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendLayout:
    """
    Layout parameters supplied by the presentation layer.

    Attributes:
        axis_extent: Total height shared by all rows
        column_spacing: Horizontal distance between consecutive samples
        offset: x of the first sample
        stroke: Connector stroke color
        dash: Connector dash pattern
    """
    axis_extent: float = 70.0
    column_spacing: float = 43.0
    offset: float = 10.0
    stroke: str = "#888888"
    dash: str = "2,2"

    def __post_init__(self):
        if self.axis_extent <= 0:
            raise InvalidLayoutError(
                f"axis_extent must be positive, got {self.axis_extent}",
                field="axis_extent",
            )
        if self.column_spacing <= 0:
            raise InvalidLayoutError(
                f"column_spacing must be positive, got {self.column_spacing}",
                field="column_spacing",
            )

    def row_height(self, total_bands: int) -> float:
        if total_bands <= 0:
            return 0.0
        return self.axis_extent / total_bands

    def column_x(self, index: int) -> float:
        return index * self.column_spacing + self.offset


def _row_index(band: Optional[Band], rows: List[Band]) -> int:
    if band is None:
        return -1
    for index, row in enumerate(rows):
        if row is band:
            return index
    return -1


def build_trend_path(
    series: Sequence[Sample],
    bands: Sequence[Band],
    layout: Optional[TrendLayout] = None,
    high_inclusive: bool = True,
) -> TrendPath:
    """
    Position a chronological series against a BandSet.

    Args:
        series: Samples in chronological order (never re-sorted here)
        bands: BandSet in any order
        layout: Row/column geometry, defaults to TrendLayout()
        high_inclusive: Whether a value equal to a band's upper bound belongs to it

    Returns:
        TrendPath with one point per sample, n-1 connectors and the
        per-row marker grid. Empty or single-sample series produce no
        connectors.
    """
    layout = layout or TrendLayout()
    rows = descending_bands(bands)
    total = len(rows)

    points: List[TrendPoint] = []
    for index, sample in enumerate(series):
        # resolved in ascending order so ties match classify; rows share the same objects
        band = resolve_band(sample.value, bands, high_inclusive)
        if band is None:
            band = find_band_by_status(sample.status, rows)
            if band is not None:
                logger.debug(
                    "Sample placed by status label",
                    extra={'value': sample.value, 'status': sample.status, 'date': sample.date}
                )
        row_index = _row_index(band, rows)
        if row_index == -1 and total:
            logger.warning(
                "Sample matches no band",
                extra={'value': sample.value, 'status': sample.status, 'date': sample.date}
            )

        y = vertical_center(row_index, total, layout.axis_extent) if row_index >= 0 else 0.0
        points.append(TrendPoint(
            sample=sample,
            position=PositionedPoint(x=layout.column_x(index), y=y),
            band=band,
            row_index=row_index,
            visibility=marker_visibility(band, sample.status, sample.value, rows, high_inclusive),
        ))

    connectors = [
        Connector(
            start=current.position,
            end=following.position,
            stroke=layout.stroke,
            dash=layout.dash,
        )
        for current, following in zip(points, points[1:])
    ]

    marker_rows: List[List[MarkerVisibility]] = [
        [marker_visibility(row, s.status, s.value, rows, high_inclusive) for s in series]
        for row in rows
    ]

    return TrendPath(
        rows=rows,
        points=points,
        connectors=connectors,
        marker_rows=marker_rows,
        axis_extent=layout.axis_extent,
    )
