"""
Pydantic schemas for the reference band catalog.
"""
from typing import List

from pydantic import BaseModel, Field

from schemas.ranges import BandResponse


class BiomarkerResponse(BaseModel):
    """Single biomarker definition for API response."""
    canonical_name: str = Field(..., examples=["vitamin d"])
    display_name: str = Field(..., examples=["Vitamin D"])
    unit: str = Field(..., examples=["ng/mL"])
    category: str = Field(..., examples=["vitamin"])
    description: str
    aliases: List[str]


class BiomarkerListResponse(BaseModel):
    biomarkers: List[BiomarkerResponse]
    count: int


class BiomarkerBandsResponse(BaseModel):
    biomarker: BiomarkerResponse
    bands: List[BandResponse] = Field(..., description="Default BandSet in ascending order")
