"""
Service layer for business logic.

The range engine lives in services.ranges; RangeChartService is the
orchestration layer the API talks to.
"""
from services.range_chart_service import Classification, RangeChartService

__all__ = [
    "Classification",
    "RangeChartService",
]
