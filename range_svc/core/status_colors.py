"""
Status color table - single source of truth for band display colors.

This module provides:
- YAML-based loading and validation of the status -> color table
- resolve_color(): exact-match lookup with override and fallback

Every component that paints a band (gradients, status bar, trend rows,
Plotly preview) MUST resolve its color here.

Usage:
    from core.status_colors import resolve_color

    resolve_color("Ok")                   # "#D8D800"
    resolve_color("Ok", "#123456")        # "#123456" (override wins)
    resolve_color("Something else")       # "#FBAD37" (fallback)
"""

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r'^#[0-9A-Fa-f]{6}$')


# =============================================================================
# YAML CONFIGURATION LOADING & VALIDATION
# =============================================================================

def _get_config_path() -> Path:
    """Get the path to the status color configuration file."""
    return Path(__file__).parent / 'status_colors.yaml'


def _load_yaml_config() -> Dict[str, Any]:
    """
    Load and parse the YAML configuration file.

    Raises:
        FileNotFoundError: If status_colors.yaml is not found
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = _get_config_path()
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        logger.error("Status color config file not found", extra={'path': str(config_path)})
        raise
    except yaml.YAMLError as e:
        logger.error("Failed to parse status color config", extra={'path': str(config_path), 'error': str(e)})
        raise


def is_hex_color(color: Any) -> bool:
    """True for '#RRGGBB' strings, the only form the table and figures accept."""
    return isinstance(color, str) and bool(_HEX_COLOR.match(color))


def _validate_color(color: Any, where: str) -> str:
    if not is_hex_color(color):
        raise ValueError(f"{where} has invalid color format: '{color}'")
    return color


def build_color_table(config: Dict[str, Any]) -> Tuple[Dict[str, str], str]:
    """
    Build the label -> color lookup from a parsed config mapping.

    Raises:
        ValueError: On malformed colors, missing labels or duplicate labels
    """
    fallback = _validate_color(config.get('fallback_color'), "fallback_color")

    table: Dict[str, str] = {}
    for index, entry in enumerate(config.get('statuses') or []):
        color = _validate_color(entry.get('color'), f"Status entry at index {index}")
        labels = entry.get('labels') or []
        if not labels:
            raise ValueError(f"Status entry at index {index} has no labels")
        for label in labels:
            if label in table:
                raise ValueError(f"Status label '{label}' is defined more than once")
            table[label] = color
    return table, fallback


@lru_cache(maxsize=1)
def _load_table() -> Tuple[Dict[str, str], str]:
    """Load and cache the color table. The YAML file is read once per process."""
    table, fallback = build_color_table(_load_yaml_config())
    logger.debug("Status color table loaded", extra={'labels': len(table)})
    return table, fallback


# =============================================================================
# PUBLIC API
# =============================================================================

def resolve_color(status: Optional[str], override: Optional[str] = None) -> str:
    """
    Resolve the display color for a band status.

    Args:
        status: Status label, matched exactly (case-sensitive)
        override: Explicit color carried by the band; wins when non-empty

    Returns:
        Hex color string. Unknown labels get the fallback color, never an error.
    """
    if override:
        return override
    table, fallback = _load_table()
    if status is None:
        return fallback
    return table.get(status, fallback)


def fallback_color() -> str:
    """Color used for status labels that are not in the table."""
    return _load_table()[1]


def known_statuses() -> Dict[str, str]:
    """Copy of the full label -> color table."""
    return dict(_load_table()[0])
