"""
Plotly figure builder for range engine previews.

Responsibilities:
- Drawing band rows (translucent fill in the band color, colored right edge)
- Drawing dashed connectors and sample markers from a TrendPath
- Column date labels and row edge captions

This module only consumes engine output; every coordinate comes from
TrendPath, so the figure uses the engine's screen space directly
(y grows downward, highest band at the top).
"""

import logging
from typing import Any, Dict, List

import plotly.graph_objects as go

from core.datetime_utils import column_date_label
from core.status_colors import is_hex_color, resolve_color
from services.ranges.formatter import format_number, row_edge_label
from services.ranges.gradients import band_color
from services.ranges.models import Band, TrendPath

logger = logging.getLogger(__name__)

ROW_FILL_OPACITY = 0.15
ROW_EDGE_WIDTH = 5
MARKER_SIZE = 8


def _hex_to_rgba(color: str, alpha: float) -> str:
    """'#B2302E' -> 'rgba(178, 48, 46, 0.15)'. Non-hex colors are returned unchanged."""
    if not is_hex_color(color):
        return color
    r, g, b = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    return f"rgba({r}, {g}, {b}, {alpha})"


def _figure_color(band: Band) -> str:
    """Band color usable by Plotly. Overrides that are not '#RRGGBB' fall back to the status color."""
    color = band_color(band)
    if is_hex_color(color):
        return color
    logger.warning("Ignoring non-hex band color in figure", extra={'color': color, 'status': band.status})
    return resolve_color(band.status)


def _plotly_dash(dash: str) -> str:
    """SVG dash pattern "2,2" -> Plotly "2px,2px"."""
    parts = [p.strip() for p in dash.split(',') if p.strip()]
    if not parts:
        return 'solid'
    return ','.join(f"{p}px" for p in parts)


class RangePlotlyBuilder:
    """
    Builder for stacked historical range charts.

    Usage:
        builder = RangePlotlyBuilder()
        fig = builder.create_trend_figure(path, title="Vitamin D", unit="ng/mL")
        html = pio.to_html(fig, include_plotlyjs='cdn', config=builder.get_config())
    """

    def create_trend_figure(self, path: TrendPath, title: str = "", unit: str = "") -> go.Figure:
        """Create a figure from a TrendPath. Empty paths get a placeholder layout."""
        fig = go.Figure()
        if not path.rows:
            self.apply_empty_layout(fig, title)
            return fig

        width = self._plot_width(path)
        self.add_band_rows(fig, path, width)
        self.add_connectors(fig, path)
        self.add_markers(fig, path, unit)
        self.apply_layout(fig, path, width, title)
        return fig

    def _plot_width(self, path: TrendPath) -> float:
        if not path.points:
            return 100.0
        return path.points[-1].position.x + 30.0

    def add_band_rows(self, fig: go.Figure, path: TrendPath, width: float) -> None:
        row_height = path.axis_extent / len(path.rows)
        for index, band in enumerate(path.rows):
            color = _figure_color(band)
            y0 = index * row_height
            y1 = y0 + row_height
            fig.add_shape(
                type="rect",
                x0=0, x1=width, y0=y0, y1=y1,
                fillcolor=_hex_to_rgba(color, ROW_FILL_OPACITY),
                line=dict(width=0),
                layer="below",
            )
            fig.add_shape(
                type="line",
                x0=width, x1=width, y0=y0, y1=y1,
                line=dict(color=color, width=ROW_EDGE_WIDTH),
            )
            caption = row_edge_label(band)
            if caption:
                fig.add_annotation(
                    x=width, y=y1, text=caption,
                    xanchor='right', yanchor='bottom',
                    showarrow=False, opacity=0.35,
                    font=dict(size=8),
                )

    def add_connectors(self, fig: go.Figure, path: TrendPath) -> None:
        for connector in path.connectors:
            fig.add_shape(
                type="line",
                x0=connector.start.x, y0=connector.start.y,
                x1=connector.end.x, y1=connector.end.y,
                line=dict(color=connector.stroke, width=connector.width, dash=_plotly_dash(connector.dash)),
            )

    def add_markers(self, fig: go.Figure, path: TrendPath, unit: str = "") -> None:
        visible = [p for p in path.points if p.visibility.visible and p.band is not None]
        if not visible:
            return
        fig.add_trace(go.Scatter(
            x=[p.position.x for p in visible],
            y=[p.position.y for p in visible],
            mode='markers+text',
            marker=dict(
                size=MARKER_SIZE,
                color=[_figure_color(p.band) for p in visible],
                line=dict(width=1, color='#F9FAFB'),
            ),
            text=[format_number(float(p.sample.value)) for p in visible],
            textposition='top center',
            textfont=dict(size=8),
            customdata=[[p.sample.status, p.sample.date] for p in visible],
            hovertemplate=(
                f"<b>%{{text}} {unit}</b><br>"
                "%{customdata[0]}<br>"
                "%{customdata[1]}"
                "<extra></extra>"
            ),
            showlegend=False,
        ))

    def apply_layout(self, fig: go.Figure, path: TrendPath, width: float, title: str = "") -> None:
        tickvals: List[float] = []
        ticktext: List[str] = []
        for point in path.points:
            day_month, year = column_date_label(point.sample.date)
            tickvals.append(point.position.x)
            ticktext.append(f"{day_month}<br><span style='color:#B0B0B0'>{year}</span>")

        fig.update_layout(
            title=dict(text=f"<b>{title}</b>" if title else "", x=0.5, xanchor="center"),
            xaxis=dict(
                range=[0, width],
                tickvals=tickvals,
                ticktext=ticktext,
                showgrid=False,
                zeroline=False,
                tickfont=dict(size=8, color='#888888'),
            ),
            yaxis=dict(
                range=[path.axis_extent, 0],  # screen space: y grows downward
                showgrid=False,
                showticklabels=False,
                zeroline=False,
            ),
            height=260,
            margin=dict(l=20, r=20, t=50, b=40),
            template="plotly_white",
            paper_bgcolor='#FFFFFF',
            plot_bgcolor='#FFFFFF',
        )

    def apply_empty_layout(self, fig: go.Figure, title: str = "") -> None:
        """Layout for a biomarker without reference bands."""
        fig.update_layout(
            title=dict(text=f"<b>{title}</b>" if title else "", x=0.5, xanchor="center"),
            xaxis=dict(showgrid=False, showticklabels=False, zeroline=False),
            yaxis=dict(showgrid=False, showticklabels=False, zeroline=False),
            height=200,
            template="plotly_white",
            annotations=[
                dict(text='No reference ranges available', xref='paper', yref='paper',
                     x=0.5, y=0.5, showarrow=False, font=dict(size=14, color='#757575')),
            ],
        )

    def get_config(self) -> Dict[str, Any]:
        """Static chart: no mode bar, no zooming."""
        return {
            'displayModeBar': False,
            'displaylogo': False,
            'responsive': True,
            'staticPlot': False,
            'scrollZoom': False,
        }
