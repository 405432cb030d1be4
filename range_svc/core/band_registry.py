"""
Reference band catalog - default BandSets per biomarker.

This module provides:
- YAML-based loading and validation of reference_bands.yaml
- BiomarkerDefinition dataclass carrying the default BandSet
- Lookup by canonical name or alias (normalized, no fuzzy matching)

YAML access is encapsulated here - no other module should read
reference_bands.yaml directly.

Usage:
    from core.band_registry import get_reference_bands, list_biomarkers

    bands = get_reference_bands("Vitamin D")   # List[Band]
    names = list(list_biomarkers())
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from core.exceptions import UnknownBiomarkerError
from services.ranges.models import Band, parse_bound

logger = logging.getLogger(__name__)


# =============================================================================
# BIOMARKER DEFINITION DATACLASS
# =============================================================================

@dataclass(frozen=True)
class BiomarkerDefinition:
    """
    Immutable reference definition for a biomarker.

    Attributes:
        canonical_name: Primary identifier
        display_name: Human-readable name
        unit: Measurement unit (e.g., "ng/mL")
        category: Grouping category (vitamin, lipid, metabolic, ...)
        description: Short explanatory text
        aliases: Alternative names that resolve to this biomarker
        bands: Default BandSet in file order
    """
    canonical_name: str
    display_name: str
    unit: str
    category: str
    description: str
    aliases: Tuple[str, ...]
    bands: Tuple[Band, ...]


# =============================================================================
# YAML CONFIGURATION LOADING & VALIDATION
# =============================================================================

def _get_config_path() -> Path:
    return Path(__file__).parent / 'reference_bands.yaml'


def _load_yaml_config() -> Dict[str, Any]:
    """
    Raises:
        FileNotFoundError: If reference_bands.yaml is not found
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = _get_config_path()
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        logger.error("Reference band file not found", extra={'path': str(config_path)})
        raise
    except yaml.YAMLError as e:
        logger.error("Failed to parse reference band file", extra={'path': str(config_path), 'error': str(e)})
        raise


def _parse_band(raw: Dict[str, Any], biomarker: str, index: int) -> Band:
    if not raw.get('status'):
        raise ValueError(f"Biomarker '{biomarker}' band {index} is missing 'status'")
    for key in ('low', 'high'):
        value = raw.get(key)
        if value is not None and parse_bound(value) is None:
            raise ValueError(f"Biomarker '{biomarker}' band {index} has non-numeric {key}: '{value}'")
    return Band(
        low=raw.get('low'),
        high=raw.get('high'),
        status=raw['status'],
        label=raw.get('label') or '',
        color=raw.get('color'),
    )


def parse_biomarker_entry(raw: Dict[str, Any], index: int) -> BiomarkerDefinition:
    """
    Validate and parse one biomarker entry.

    Raises:
        ValueError: If required fields are missing or bands are malformed
    """
    canonical_name = raw.get('canonical_name')
    if not canonical_name:
        raise ValueError(f"Biomarker at index {index} is missing required field: 'canonical_name'")

    raw_bands = raw.get('bands') or []
    if not raw_bands:
        raise ValueError(f"Biomarker '{canonical_name}' has no bands")

    return BiomarkerDefinition(
        canonical_name=canonical_name,
        display_name=raw.get('display_name', canonical_name.title()),
        unit=raw.get('unit', ''),
        category=raw.get('category', 'other'),
        description=raw.get('description', ''),
        aliases=tuple(raw.get('aliases') or ()),
        bands=tuple(_parse_band(b, canonical_name, i) for i, b in enumerate(raw_bands)),
    )


def _normalize_name(name: str) -> str:
    """Lowercase, strip, drop punctuation, collapse whitespace."""
    if not name:
        return ''
    normalized = name.lower().strip()
    normalized = re.sub(r'[^a-z0-9\s]', ' ', normalized)
    return re.sub(r'\s+', ' ', normalized).strip()


@lru_cache(maxsize=1)
def _load_registry() -> Tuple[Tuple[BiomarkerDefinition, ...], Dict[str, BiomarkerDefinition]]:
    """Load, validate and index the catalog once per process."""
    config = _load_yaml_config() or {}
    definitions = tuple(
        parse_biomarker_entry(raw, i) for i, raw in enumerate(config.get('biomarkers') or [])
    )

    lookup: Dict[str, BiomarkerDefinition] = {}
    for definition in definitions:
        for name in (definition.canonical_name,) + definition.aliases:
            key = _normalize_name(name)
            if key in lookup and lookup[key] is not definition:
                logger.warning(
                    "Biomarker name collision",
                    extra={'alias': key, 'existing': lookup[key].canonical_name}
                )
                continue
            lookup[key] = definition

    logger.debug("Reference band catalog loaded", extra={'biomarkers': len(definitions)})
    return definitions, lookup


# =============================================================================
# PUBLIC API
# =============================================================================

def get_biomarker(name: str) -> BiomarkerDefinition:
    """
    Get a biomarker definition by canonical name or alias.

    Raises:
        UnknownBiomarkerError: If the name is not in the catalog
    """
    _, lookup = _load_registry()
    definition = lookup.get(_normalize_name(name))
    if definition is None:
        raise UnknownBiomarkerError(biomarker=name)
    return definition


def get_reference_bands(name: str) -> List[Band]:
    """Default BandSet for a biomarker, as a fresh list the caller may modify."""
    return list(get_biomarker(name).bands)


def list_biomarkers() -> Dict[str, BiomarkerDefinition]:
    """All biomarker definitions keyed by canonical name."""
    definitions, _ = _load_registry()
    return {d.canonical_name: d for d in definitions}
