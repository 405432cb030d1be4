"""
Core module for application configuration, logging, and shared catalogs.

This module provides:
- Settings: Application configuration via pydantic-settings
- Dependency injection: FastAPI Depends() functions for services
- Exceptions: Domain-specific exception classes with HTTP status codes
- Datetime utilities: UTC timestamps and column date labels
- Status colors: the shared status -> color table

The reference band catalog is imported directly from core.band_registry
(it depends on the range engine records).
"""
from core.config import settings, Settings

from core.dependencies import (
    get_default_layout,
    get_range_chart_service,
)

from core.exceptions import (
    RangeServiceError,
    InvalidLayoutError,
    UnknownBiomarkerError,
    setup_exception_handlers,
)

from core.datetime_utils import (
    utc_now,
    format_iso,
    column_date_label,
)

from core.status_colors import (
    resolve_color,
    fallback_color,
    known_statuses,
    is_hex_color,
)

from core.config import (
    # Backwards-compatible exports
    API_HOST,
    API_PORT,
    API_RELOAD,
)

__all__ = [
    # Settings
    "settings",
    "Settings",
    # Dependency injection
    "get_default_layout",
    "get_range_chart_service",
    # Exceptions
    "RangeServiceError",
    "InvalidLayoutError",
    "UnknownBiomarkerError",
    "setup_exception_handlers",
    # Datetime utilities
    "utc_now",
    "format_iso",
    "column_date_label",
    # Status colors
    "resolve_color",
    "fallback_color",
    "known_statuses",
    "is_hex_color",
    # Backwards-compatible exports
    "API_HOST",
    "API_PORT",
    "API_RELOAD",
]
