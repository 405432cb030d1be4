"""
Ranges router - range engine endpoints.

Each endpoint takes a BandSet (plus a value or series) and returns the
description a renderer needs: ordered bands, classification, status bar
segments, gradients or trend geometry. All endpoints require API key
authentication.

Architecture:
    HTTP Request → Router (this file) → RangeChartService → services.ranges

Dependency Injection:
    RangeChartService is injected via Depends(get_range_chart_service),
    configured from settings in core/dependencies.py.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from core.auth import verify_api_key
from core.dependencies import get_range_chart_service
from core.middleware import metrics_collector
from schemas import (
    BandResponse,
    BandSetRequest,
    ClassifyRequest,
    ClassifyResponse,
    ConnectorResponse,
    GradientResponse,
    GradientStopSchema,
    GradientsResponse,
    NormalizeResponse,
    StatusBarRequest,
    StatusBarResponse,
    StatusBarSegmentResponse,
    StatusMarkerResponse,
    TrendPointResponse,
    TrendRequest,
    TrendResponse,
)
from services import RangeChartService
from services.ranges.gradients import band_color
from services.ranges.models import BandGradient, StatusBar, TrendPath

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/ranges",
    tags=["Ranges"],
    dependencies=[Depends(verify_api_key)],  # Require API key for all endpoints
)


# =============================================================================
# RESPONSE CONVERSION
# =============================================================================

def _gradient_to_response(gradient: BandGradient) -> GradientResponse:
    return GradientResponse(
        band=BandResponse.from_band(gradient.band),
        stops=[GradientStopSchema(color=s.color, position=s.position) for s in gradient.stops],
        css=gradient.to_css(),
    )


def _status_bar_to_response(bar: StatusBar) -> StatusBarResponse:
    segments: List[StatusBarSegmentResponse] = []
    for segment in bar.segments:
        marker = None
        if segment.marker is not None:
            marker = StatusMarkerResponse(
                left_percent=segment.marker.left_percent,
                label_offset=segment.marker.label_offset,
                value_text=segment.marker.value_text,
                unit=segment.marker.unit,
            )
        segments.append(StatusBarSegmentResponse(
            band=BandResponse.from_band(segment.band),
            label=segment.label,
            range_text=segment.range_text,
            background=segment.gradient.to_css(),
            width_percent=segment.width_percent,
            visibility=segment.visibility.value,
            marker=marker,
        ))
    return StatusBarResponse(
        segments=segments,
        band=BandResponse.from_band(bar.band) if bar.band is not None else None,
    )


def _trend_to_response(path: TrendPath) -> TrendResponse:
    return TrendResponse(
        rows=[BandResponse.from_band(b) for b in path.rows],
        points=[
            TrendPointResponse(
                value=p.sample.value,
                status=p.sample.status,
                date=p.sample.date,
                x=p.position.x,
                y=p.position.y,
                row_index=p.row_index,
                visibility=p.visibility.value,
                color=band_color(p.band) if p.band is not None else None,
            )
            for p in path.points
        ],
        connectors=[
            ConnectorResponse(
                x1=c.start.x, y1=c.start.y,
                x2=c.end.x, y2=c.end.y,
                stroke=c.stroke, dash=c.dash, width=c.width,
            )
            for c in path.connectors
        ],
        marker_rows=[[v.value for v in row] for row in path.marker_rows],
        axis_extent=path.axis_extent,
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post(
    "/normalize",
    response_model=NormalizeResponse,
    summary="Order a BandSet",
    description="Return the BandSet in ascending order (open lower bound first) and in descending order "
                "for stacked layouts. Each band carries its range text and resolved color."
)
async def normalize(
    request: BandSetRequest,
    service: RangeChartService = Depends(get_range_chart_service)
):
    ascending, descending = service.normalize(request.to_bands())
    return NormalizeResponse(
        ascending=[BandResponse.from_band(b) for b in ascending],
        descending=[BandResponse.from_band(b) for b in descending],
    )


@router.post(
    "/classify",
    response_model=ClassifyResponse,
    summary="Classify a value",
    description="Find the band containing a value, the marker position inside it, "
                "whether that band shows the marker for the given status, and its color."
)
async def classify(
    request: ClassifyRequest,
    service: RangeChartService = Depends(get_range_chart_service)
):
    """
    Classify one value.

    - **bands**: BandSet in any order
    - **value**: Value to classify (null positions the marker at 50%)
    - **status**: Status label reported with the value
    - **high_inclusive**: Override the configured upper-bound inclusivity

    Overlapping bands resolve to the first match in ascending order.
    """
    result = service.classify(
        request.to_bands(),
        request.value,
        request.status,
        high_inclusive=request.high_inclusive,
    )
    metrics_collector.record_render("classify")
    return ClassifyResponse(
        band=BandResponse.from_band(result.band) if result.band is not None else None,
        percent=result.percent,
        visibility=result.visibility.value,
        color=result.color,
    )


@router.post(
    "/status-bar",
    response_model=StatusBarResponse,
    summary="Describe a status bar",
    description="One equal-width segment per band in ascending order, with caption, range text, "
                "boundary gradient and the value marker on the segment(s) that show it."
)
async def status_bar(
    request: StatusBarRequest,
    service: RangeChartService = Depends(get_range_chart_service)
):
    bar = service.status_bar(
        request.to_bands(),
        request.value,
        request.status,
        unit=request.unit,
        high_inclusive=request.high_inclusive,
    )
    metrics_collector.record_render("status_bar")
    return _status_bar_to_response(bar)


@router.post(
    "/gradients",
    response_model=GradientsResponse,
    summary="Compose band gradients",
    description="Each band blends into the next band's color between 80% and 100% of its width; "
                "the last band is solid."
)
async def gradients(
    request: BandSetRequest,
    service: RangeChartService = Depends(get_range_chart_service)
):
    return GradientsResponse(
        gradients=[_gradient_to_response(g) for g in service.gradients(request.to_bands())]
    )


@router.post(
    "/trend",
    response_model=TrendResponse,
    summary="Lay out a historical trend",
    description="Position a chronological series on descending band rows: one column per sample, "
                "dashed connectors between consecutive samples and the per-row marker grid."
)
async def trend(
    request: TrendRequest,
    service: RangeChartService = Depends(get_range_chart_service)
):
    """
    Build trend geometry.

    Raises:
    - 400 Bad Request: If layout overrides make axis_extent or column_spacing non-positive
    """
    layout = service.layout_with(request.layout.to_overrides() if request.layout else None)
    path = service.trend(
        request.to_series(),
        request.to_bands(),
        layout=layout,
        high_inclusive=request.high_inclusive,
    )
    metrics_collector.record_render("trend")
    return _trend_to_response(path)


@router.post(
    "/trend/html",
    summary="Render a historical trend preview",
    description="Render the trend as a standalone Plotly HTML page (band rows, connectors, markers)."
)
async def trend_html(
    request: TrendRequest,
    service: RangeChartService = Depends(get_range_chart_service)
):
    layout = service.layout_with(request.layout.to_overrides() if request.layout else None)
    html_content = service.render_trend_html(
        request.to_series(),
        request.to_bands(),
        title=request.title,
        unit=request.unit,
        layout=layout,
        high_inclusive=request.high_inclusive,
    )
    metrics_collector.record_render("trend_html")
    return Response(content=html_content, media_type="text/html")
