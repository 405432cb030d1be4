"""
Health, readiness, and metrics endpoints for operational visibility.

This module provides:
- /health: Liveness probe (is the app running?)
- /ready: Readiness probe (do the color table and band catalog load?)
- /metrics: Prometheus-compatible request and render metrics

No authentication required (internal/infrastructure use).
"""
import logging
import time
from typing import Any, Callable, Dict, List, Optional

import yaml
from fastapi import APIRouter, Response
from pydantic import BaseModel

from core.band_registry import list_biomarkers
from core.datetime_utils import format_iso, utc_now
from core.middleware import get_metrics_collector
from core.status_colors import known_statuses

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health & Observability"])

SERVICE_VERSION = "1.0.0"


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class HealthResponse(BaseModel):
    """Response model for /health endpoint."""
    status: str  # "healthy"
    version: str
    timestamp: str  # ISO 8601 UTC


class DependencyStatus(BaseModel):
    """Status of a single catalog."""
    name: str
    status: str  # "ok", "unavailable"
    latency_ms: Optional[float] = None
    message: Optional[str] = None


class ReadyResponse(BaseModel):
    """Response model for /ready endpoint."""
    status: str  # "ready", "not_ready"
    dependencies: List[DependencyStatus]
    timestamp: str


class MetricsResponse(BaseModel):
    """Response model for JSON metrics endpoint."""
    http_requests_total: int
    http_requests_2xx_total: int
    http_requests_4xx_total: int
    http_requests_5xx_total: int
    http_request_duration_ms_p50: float
    http_request_duration_ms_p95: float
    http_request_duration_ms_p99: float
    renders_total: Dict[str, int]


def _timestamp() -> str:
    return format_iso(utc_now())


# =============================================================================
# HEALTH ENDPOINT (LIVENESS)
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Check if the application is running. Returns immediately without loading catalogs."
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=SERVICE_VERSION, timestamp=_timestamp())


# =============================================================================
# READINESS ENDPOINT
# =============================================================================

def _check_catalog(name: str, loader: Callable[[], Any]) -> DependencyStatus:
    """
    Load a YAML catalog and report how many entries it holds.

    Catalogs are cached after the first successful load, so this is cheap
    once the service is warm.
    """
    start = time.perf_counter()
    try:
        entries = loader()
    except (OSError, ValueError, yaml.YAMLError) as e:
        latency_ms = (time.perf_counter() - start) * 1000
        logger.error("Catalog check failed", extra={"catalog": name, "error": str(e)})
        return DependencyStatus(
            name=name,
            status="unavailable",
            latency_ms=round(latency_ms, 2),
            message=f"Load failed: {type(e).__name__}"
        )

    latency_ms = (time.perf_counter() - start) * 1000
    return DependencyStatus(
        name=name,
        status="ok",
        latency_ms=round(latency_ms, 2),
        message=f"{len(entries)} entries"
    )


@router.get(
    "/ready",
    response_model=ReadyResponse,
    summary="Readiness probe",
    description="Check that the status color table and reference band catalog load. Returns 503 if not."
)
async def readiness_check(response: Response) -> ReadyResponse:
    dependencies = [
        _check_catalog("status_colors", known_statuses),
        _check_catalog("reference_bands", list_biomarkers),
    ]

    if any(d.status != "ok" for d in dependencies):
        status = "not_ready"
        response.status_code = 503
    else:
        status = "ready"

    return ReadyResponse(status=status, dependencies=dependencies, timestamp=_timestamp())


# =============================================================================
# METRICS ENDPOINT
# =============================================================================

@router.get(
    "/metrics",
    summary="Prometheus metrics",
    description="Export metrics in Prometheus text format. "
                "Includes HTTP request counts, latency percentiles, and engine renders by kind."
)
async def get_metrics() -> Response:
    """
    Export metrics in Prometheus text format.

    Metrics exposed:
    - http_requests_total: Total request count
    - http_requests_by_status{status="2xx|4xx|5xx"}: Requests by status category
    - http_request_duration_ms{quantile="0.5|0.95|0.99"}: Latency percentiles
    - range_renders_total{kind="..."}: Engine renders by kind
    """
    collector = get_metrics_collector()
    return Response(
        content=collector.get_prometheus_format(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@router.get(
    "/metrics/json",
    response_model=MetricsResponse,
    summary="JSON metrics",
    description="Export metrics in JSON format for custom dashboards or API consumers."
)
async def get_metrics_json() -> MetricsResponse:
    collector = get_metrics_collector()
    return MetricsResponse(**collector.get_summary())


# =============================================================================
# ROOT ENDPOINT
# =============================================================================

@router.get(
    "/",
    summary="API root",
    description="Root endpoint with basic API information."
)
async def root() -> Dict[str, Any]:
    return {
        "service": "Range Service API",
        "version": SERVICE_VERSION,
        "docs": "/docs",
        "health": "/health",
        "ready": "/ready",
        "metrics": "/metrics"
    }
