"""
Pydantic schemas for API request/response validation.

This module contains all Pydantic models used at API boundaries.
"""
from schemas.ranges import (
    BandSchema,
    SampleSchema,
    TrendLayoutSchema,
    BandSetRequest,
    ClassifyRequest,
    StatusBarRequest,
    TrendRequest,
    BandResponse,
    NormalizeResponse,
    ClassifyResponse,
    GradientStopSchema,
    GradientResponse,
    GradientsResponse,
    StatusMarkerResponse,
    StatusBarSegmentResponse,
    StatusBarResponse,
    TrendPointResponse,
    ConnectorResponse,
    TrendResponse,
)
from schemas.biomarkers import (
    BiomarkerResponse,
    BiomarkerListResponse,
    BiomarkerBandsResponse,
)

__all__ = [
    # Input records
    "BandSchema",
    "SampleSchema",
    "TrendLayoutSchema",
    # Requests
    "BandSetRequest",
    "ClassifyRequest",
    "StatusBarRequest",
    "TrendRequest",
    # Range responses
    "BandResponse",
    "NormalizeResponse",
    "ClassifyResponse",
    "GradientStopSchema",
    "GradientResponse",
    "GradientsResponse",
    "StatusMarkerResponse",
    "StatusBarSegmentResponse",
    "StatusBarResponse",
    "TrendPointResponse",
    "ConnectorResponse",
    "TrendResponse",
    # Catalog responses
    "BiomarkerResponse",
    "BiomarkerListResponse",
    "BiomarkerBandsResponse",
]
