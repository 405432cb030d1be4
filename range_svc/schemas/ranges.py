"""
Pydantic schemas for range engine API operations.

Bounds accept numbers, numeric strings, free text or null exactly as lab
reference data supplies them; the engine decides how each one parses.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from services.ranges.formatter import format_band_range
from services.ranges.gradients import band_color
from services.ranges.models import Band, Sample

BoundValue = Optional[Union[float, str]]


# =============================================================================
# INPUT RECORDS
# =============================================================================

class BandSchema(BaseModel):
    """Schema for one band of a biomarker scale.

    A null, empty or non-numeric bound is treated as open-ended.
    """
    low: BoundValue = Field(None, description="Lower bound (null for open-ended)", examples=[100, "4.5", None])
    high: BoundValue = Field(None, description="Upper bound (null for open-ended)", examples=[200, None])
    status: str = Field(..., description="Status label of the band", examples=["Ok", "OptimalRange"])
    label: str = Field("", description="Caption shown above the band", examples=["Normal"])
    color: Optional[str] = Field(None, description="Explicit color overriding the status color", examples=["#37B45E"])

    def to_band(self) -> Band:
        return Band(low=self.low, high=self.high, status=self.status, label=self.label, color=self.color)


class SampleSchema(BaseModel):
    """Schema for one historical observation."""
    value: float = Field(..., description="Measured value", examples=[150.0])
    status: str = Field("", description="Status reported with the value", examples=["Ok"])
    date: str = Field("", description="ISO date of the observation", examples=["2024-03-14"])

    def to_sample(self) -> Sample:
        return Sample(value=self.value, status=self.status, date=self.date)


class TrendLayoutSchema(BaseModel):
    """Per-request layout overrides; omitted fields use the configured defaults."""
    axis_extent: Optional[float] = Field(None, description="Total height shared by all rows", examples=[70])
    column_spacing: Optional[float] = Field(None, description="Distance between samples", examples=[43])
    offset: Optional[float] = Field(None, description="x of the first sample", examples=[10])
    stroke: Optional[str] = Field(None, description="Connector stroke color", examples=["#888888"])
    dash: Optional[str] = Field(None, description="Connector dash pattern", examples=["2,2"])

    def to_overrides(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


# =============================================================================
# REQUESTS
# =============================================================================

class BandSetRequest(BaseModel):
    """Request carrying only a BandSet."""
    bands: List[BandSchema] = Field(default_factory=list, description="Bands in any order")

    def to_bands(self) -> List[Band]:
        return [b.to_band() for b in self.bands]


class ClassifyRequest(BandSetRequest):
    """Classify one value against a BandSet."""
    value: Optional[float] = Field(None, description="Value to classify", examples=[150])
    status: Optional[str] = Field(None, description="Status label reported with the value", examples=["Ok"])
    high_inclusive: Optional[bool] = Field(
        None,
        description="Whether a value equal to a band's upper bound belongs to it (default from settings)",
    )


class StatusBarRequest(ClassifyRequest):
    """Describe the status bar for one value."""
    unit: str = Field("", description="Display unit for the marker label", examples=["ng/mL"])


class TrendRequest(BandSetRequest):
    """Position a chronological series against a BandSet."""
    series: List[SampleSchema] = Field(default_factory=list, description="Samples in chronological order")
    layout: Optional[TrendLayoutSchema] = Field(None, description="Layout overrides")
    high_inclusive: Optional[bool] = Field(None, description="Upper-bound inclusivity (default from settings)")
    title: str = Field("", description="Chart title for HTML previews", examples=["Vitamin D"])
    unit: str = Field("", description="Display unit for HTML previews", examples=["ng/mL"])

    class Config:
        json_schema_extra = {
            "example": {
                "bands": [
                    {"low": None, "high": 100, "status": "Low"},
                    {"low": 100, "high": 200, "status": "Ok"},
                    {"low": 200, "high": None, "status": "High"},
                ],
                "series": [
                    {"value": 50, "status": "Low", "date": "2024-01-10"},
                    {"value": 150, "status": "Ok", "date": "2024-04-02"},
                    {"value": 250, "status": "High", "date": "2024-09-21"},
                ],
            }
        }

    def to_series(self) -> List[Sample]:
        return [s.to_sample() for s in self.series]


# =============================================================================
# RESPONSES
# =============================================================================

class BandResponse(BaseModel):
    """A band as supplied plus its rendered range text and resolved color."""
    low: BoundValue = None
    high: BoundValue = None
    status: str
    label: str = ""
    color: Optional[str] = None
    range_text: str = Field(..., description="Display range, e.g. '< 100' or '100 - 200'")
    display_color: str = Field(..., description="Override color or the status color")

    @classmethod
    def from_band(cls, band: Band) -> "BandResponse":
        return cls(
            low=band.low,
            high=band.high,
            status=band.status,
            label=band.label,
            color=band.color,
            range_text=format_band_range(band),
            display_color=band_color(band),
        )


class NormalizeResponse(BaseModel):
    ascending: List[BandResponse]
    descending: List[BandResponse]


class ClassifyResponse(BaseModel):
    band: Optional[BandResponse] = Field(None, description="Band containing the value, null when none does")
    percent: float = Field(..., description="Horizontal marker position within the band, 5-95")
    visibility: str = Field(..., description="unique, inRange or none")
    color: str


class GradientStopSchema(BaseModel):
    color: str
    position: float


class GradientResponse(BaseModel):
    band: BandResponse
    stops: List[GradientStopSchema]
    css: str = Field(..., description="CSS background value")


class GradientsResponse(BaseModel):
    gradients: List[GradientResponse]


class StatusMarkerResponse(BaseModel):
    left_percent: float
    label_offset: float
    value_text: str
    unit: str


class StatusBarSegmentResponse(BaseModel):
    band: BandResponse
    label: str
    range_text: str
    background: str = Field(..., description="CSS background of the segment")
    width_percent: float
    visibility: str
    marker: Optional[StatusMarkerResponse] = None


class StatusBarResponse(BaseModel):
    segments: List[StatusBarSegmentResponse]
    band: Optional[BandResponse] = None


class TrendPointResponse(BaseModel):
    value: float
    status: str
    date: str
    x: float
    y: float
    row_index: int = Field(..., description="Index into rows, -1 when the sample matches no band")
    visibility: str
    color: Optional[str] = None


class ConnectorResponse(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    dash: str
    width: float


class TrendResponse(BaseModel):
    rows: List[BandResponse] = Field(..., description="Bands in descending order (top row first)")
    points: List[TrendPointResponse]
    connectors: List[ConnectorResponse]
    marker_rows: List[List[str]] = Field(..., description="Per-row visibility of each sample")
    axis_extent: float
