"""
Biomarkers router - reference band catalog endpoints.

Exposes the default BandSets from reference_bands.yaml so clients can
render a biomarker without shipping their own thresholds.
"""
import logging

from fastapi import APIRouter, Depends

from core.auth import verify_api_key
from core.band_registry import BiomarkerDefinition, get_biomarker, list_biomarkers
from schemas import BandResponse, BiomarkerBandsResponse, BiomarkerListResponse, BiomarkerResponse
from services.ranges.normalizer import normalize_bands

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/biomarkers",
    tags=["Biomarkers"],
    dependencies=[Depends(verify_api_key)],
)


def _biomarker_to_response(definition: BiomarkerDefinition) -> BiomarkerResponse:
    """Convert internal BiomarkerDefinition to API response model."""
    return BiomarkerResponse(
        canonical_name=definition.canonical_name,
        display_name=definition.display_name,
        unit=definition.unit,
        category=definition.category,
        description=definition.description,
        aliases=list(definition.aliases),
    )


@router.get(
    "",
    response_model=BiomarkerListResponse,
    summary="List biomarkers",
    description="All biomarkers in the reference band catalog."
)
async def list_biomarker_definitions() -> BiomarkerListResponse:
    definitions = list_biomarkers()
    return BiomarkerListResponse(
        biomarkers=[_biomarker_to_response(d) for d in definitions.values()],
        count=len(definitions),
    )


@router.get(
    "/{name}/bands",
    response_model=BiomarkerBandsResponse,
    summary="Get default bands",
    description="Default BandSet for a biomarker, looked up by canonical name or alias (case-insensitive)."
)
async def get_biomarker_bands(name: str) -> BiomarkerBandsResponse:
    """
    Get a biomarker's default BandSet.

    Examples:
    - GET /api/v1/biomarkers/vitamin d/bands
    - GET /api/v1/biomarkers/ldl/bands (alias)

    Raises:
    - 404 Not Found: If the name is not in the catalog (UnknownBiomarkerError)
    """
    definition = get_biomarker(name)
    return BiomarkerBandsResponse(
        biomarker=_biomarker_to_response(definition),
        bands=[BandResponse.from_band(b) for b in normalize_bands(definition.bands)],
    )
