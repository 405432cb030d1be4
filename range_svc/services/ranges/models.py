"""
Typed records for the range engine.

Bands keep their bounds exactly as supplied (number, numeric string,
free text or None) so range strings can be rendered faithfully, and expose
parsed float bounds for arithmetic. An absent or malformed bound is
open-ended; zero is a present bound.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

RawBound = Union[int, float, str, None]


def parse_bound(raw: RawBound) -> Optional[float]:
    """
    Parse a raw band bound to float.

    Returns None for None, empty/whitespace strings, NaN, infinities and
    anything that is not numeric, including Python-only spellings such as
    "1_000" or "inf". None means "no limit in this direction".
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        cleaned = str(raw).strip()
        if not cleaned:
            return None
        if '_' in cleaned:
            logger.debug("Non-numeric band bound treated as open-ended", extra={'bound': raw})
            return None
        try:
            value = float(cleaned)
        except ValueError:
            logger.debug("Non-numeric band bound treated as open-ended", extra={'bound': raw})
            return None
    if not math.isfinite(value):
        return None
    return value


@dataclass(frozen=True)
class Band:
    """
    One classification tier of a biomarker scale.

    Attributes:
        low: Raw lower bound, None when open-ended
        high: Raw upper bound, None when open-ended
        status: Status label ("Needs Focus", "Ok", "OptimalRange", ...)
        label: Caption shown above the band
        color: Explicit color overriding the status color
    """
    low: RawBound
    high: RawBound
    status: str
    label: str = ""
    color: Optional[str] = None

    @property
    def low_value(self) -> Optional[float]:
        return parse_bound(self.low)

    @property
    def high_value(self) -> Optional[float]:
        return parse_bound(self.high)


@dataclass(frozen=True)
class Sample:
    """One historical observation of a biomarker."""
    value: float
    status: str
    date: str = ""


@dataclass(frozen=True)
class PositionedPoint:
    x: float
    y: float


class MarkerVisibility(str, Enum):
    """Whether a band row should draw the marker for a value."""
    UNIQUE = "unique"
    IN_RANGE = "inRange"
    NONE = "none"

    @property
    def visible(self) -> bool:
        return self is not MarkerVisibility.NONE


# =============================================================================
# DERIVED OUTPUT RECORDS
# =============================================================================

@dataclass(frozen=True)
class GradientStop:
    color: str
    position: float  # percent along the segment


@dataclass(frozen=True)
class BandGradient:
    """Fill of one band segment: a solid color or a two-stop boundary gradient."""
    band: Band
    stops: tuple

    @property
    def is_solid(self) -> bool:
        return len(self.stops) == 1

    def to_css(self) -> str:
        if self.is_solid:
            return self.stops[0].color
        parts = ", ".join(f"{stop.color} {stop.position:g}%" for stop in self.stops)
        return f"linear-gradient(to right, {parts})"


@dataclass(frozen=True)
class Connector:
    """Straight dashed segment between two consecutive trend points."""
    start: PositionedPoint
    end: PositionedPoint
    stroke: str = "#888888"
    dash: str = "2,2"
    width: float = 1.0


@dataclass(frozen=True)
class TrendPoint:
    """A positioned sample plus the row it was placed in."""
    sample: Sample
    position: PositionedPoint
    band: Optional[Band]
    row_index: int  # index into the descending rows, -1 when unresolved
    visibility: MarkerVisibility


@dataclass
class TrendPath:
    """Geometry for a stacked historical chart."""
    rows: List[Band] = field(default_factory=list)  # descending: highest band first
    points: List[TrendPoint] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)
    marker_rows: List[List[MarkerVisibility]] = field(default_factory=list)
    axis_extent: float = 70.0

    def is_empty(self) -> bool:
        return len(self.points) == 0


@dataclass(frozen=True)
class StatusMarker:
    left_percent: float
    label_offset: float
    value_text: str
    unit: str


@dataclass(frozen=True)
class StatusBarSegment:
    band: Band
    label: str
    range_text: str
    gradient: BandGradient
    width_percent: float
    visibility: MarkerVisibility
    marker: Optional[StatusMarker] = None


@dataclass
class StatusBar:
    """Single-value horizontal bar: one segment per ascending band."""
    segments: List[StatusBarSegment] = field(default_factory=list)
    band: Optional[Band] = None  # band the value resolves to

    @property
    def markers(self) -> List[StatusMarker]:
        return [s.marker for s in self.segments if s.marker is not None]
