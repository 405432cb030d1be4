"""
Service layer for range chart descriptions.

This module orchestrates the range engine for the API:
- BandSet normalization (ascending and descending)
- Single-value classification (band, percent, visibility, color)
- Status bar and gradient composition
- Trend path geometry and its Plotly HTML preview

Engine rules live in services.ranges; this class only applies the
configured defaults (upper-bound inclusivity, layout) and delegates.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import plotly.io as pio

from core.status_colors import resolve_color
from services.ranges.classifier import marker_visibility, resolve_band
from services.ranges.gradients import band_color, compose_gradients
from services.ranges.models import Band, BandGradient, MarkerVisibility, Sample, StatusBar, TrendPath
from services.ranges.normalizer import descending_bands, normalize_bands
from services.ranges.plotly_builder import RangePlotlyBuilder
from services.ranges.positions import horizontal_percent
from services.ranges.status_bar import build_status_bar
from services.ranges.trend_path import TrendLayout, build_trend_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    """Where a single value sits on a BandSet."""
    band: Optional[Band]
    percent: float
    visibility: MarkerVisibility
    color: str


# =============================================================================
# RANGE CHART SERVICE
# =============================================================================

class RangeChartService:
    """
    Stateless facade over the range engine.

    Args:
        high_inclusive: Default upper-bound inclusivity for classification
        layout: Default stacked chart layout
        plotly_builder: Figure builder for HTML previews
    """

    def __init__(
        self,
        high_inclusive: bool = True,
        layout: Optional[TrendLayout] = None,
        plotly_builder: Optional[RangePlotlyBuilder] = None,
    ):
        self.high_inclusive = high_inclusive
        self.layout = layout or TrendLayout()
        self._builder = plotly_builder or RangePlotlyBuilder()

    def _inclusive(self, high_inclusive: Optional[bool]) -> bool:
        return self.high_inclusive if high_inclusive is None else high_inclusive

    def layout_with(self, overrides: Optional[Dict[str, Any]] = None) -> TrendLayout:
        """
        Default layout with per-request overrides applied.

        Raises:
            InvalidLayoutError: If an override makes extent or spacing non-positive
        """
        values = {k: v for k, v in (overrides or {}).items() if v is not None}
        if not values:
            return self.layout
        return dataclasses.replace(self.layout, **values)

    def normalize(self, bands: Sequence[Band]) -> Tuple[List[Band], List[Band]]:
        """Ascending and descending copies of a BandSet."""
        return normalize_bands(bands), descending_bands(bands)

    def classify(
        self,
        bands: Sequence[Band],
        value: Optional[float],
        status: Optional[str] = None,
        high_inclusive: Optional[bool] = None,
    ) -> Classification:
        inclusive = self._inclusive(high_inclusive)
        band = resolve_band(value, bands, inclusive)
        color = band_color(band) if band is not None else resolve_color(status or "")
        return Classification(
            band=band,
            percent=horizontal_percent(value, band),
            visibility=marker_visibility(band, status, value, bands, inclusive),
            color=color,
        )

    def status_bar(
        self,
        bands: Sequence[Band],
        value: Optional[float],
        status: Optional[str],
        unit: str = "",
        high_inclusive: Optional[bool] = None,
    ) -> StatusBar:
        return build_status_bar(bands, value, status, unit, self._inclusive(high_inclusive))

    def gradients(self, bands: Sequence[Band]) -> List[BandGradient]:
        return compose_gradients(bands)

    def trend(
        self,
        series: Sequence[Sample],
        bands: Sequence[Band],
        layout: Optional[TrendLayout] = None,
        high_inclusive: Optional[bool] = None,
    ) -> TrendPath:
        return build_trend_path(series, bands, layout or self.layout, self._inclusive(high_inclusive))

    def render_trend_html(
        self,
        series: Sequence[Sample],
        bands: Sequence[Band],
        title: str = "",
        unit: str = "",
        layout: Optional[TrendLayout] = None,
        high_inclusive: Optional[bool] = None,
    ) -> str:
        """Generate standalone HTML with the stacked range chart."""
        path = self.trend(series, bands, layout, high_inclusive)
        fig = self._builder.create_trend_figure(path, title=title, unit=unit)

        html = pio.to_html(
            fig,
            include_plotlyjs='cdn',
            config=self._builder.get_config(),
            div_id="range-chart",
        )
        logger.debug(
            "Rendered trend preview",
            extra={'samples': len(series), 'bands': len(path.rows), 'bytes': len(html)}
        )
        return html
