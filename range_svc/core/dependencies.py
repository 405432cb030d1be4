"""
FastAPI Dependency Injection configuration for the Range Service API.

Routers never build services themselves; they declare them with Depends()
so tests can swap them through app.dependency_overrides.

Architecture Flow:
    API Layer (Routers)
         ↓ Depends()
    Service Layer (RangeChartService)
         ↓
    Range engine (services.ranges) + YAML catalogs (core)

Usage in Routers:
    from core.dependencies import get_range_chart_service

    @router.post("/status-bar")
    async def status_bar(
        request: StatusBarRequest,
        service: RangeChartService = Depends(get_range_chart_service)
    ):
        ...

Testing:
    app.dependency_overrides[get_range_chart_service] = lambda: RangeChartService(high_inclusive=False)
"""
import logging
from functools import lru_cache

from core.config import settings

logger = logging.getLogger(__name__)


# =============================================================================
# LAYOUT DEFAULTS
# =============================================================================

def get_default_layout() -> "TrendLayout":
    """
    Build the stacked chart layout from settings.

    Raises:
        InvalidLayoutError: If the configured extent or spacing is not positive
    """
    from services.ranges.trend_path import TrendLayout

    return TrendLayout(
        axis_extent=settings.range_svc_axis_extent,
        column_spacing=settings.range_svc_column_spacing,
        offset=settings.range_svc_column_offset,
        stroke=settings.range_svc_connector_stroke,
        dash=settings.range_svc_connector_dash,
    )


# =============================================================================
# SERVICE DEPENDENCIES
# =============================================================================

@lru_cache(maxsize=1)
def get_range_chart_service() -> "RangeChartService":
    """
    Get the RangeChartService instance.

    The service is stateless, so one instance is shared across requests.

    Returns:
        RangeChartService: Configured with the settings' inclusivity and layout.
    """
    from services.range_chart_service import RangeChartService

    logger.info(
        "Initializing range chart service",
        extra={'high_inclusive': settings.range_svc_high_inclusive}
    )
    return RangeChartService(
        high_inclusive=settings.range_svc_high_inclusive,
        layout=get_default_layout(),
    )

