"""
UTC-first datetime utilities for the Range Service.

This module provides:
- Parsing of sample dates (ISO 8601 and common lab formats)
- ISO formatting for API timestamps
- Column labels for historical charts ("15.01." over "2024")

Usage:
    from core.datetime_utils import column_date_label, format_iso, utc_now

    column_date_label("2024-01-15")   # ("15.01.", "2024")
"""
import logging
from datetime import datetime, timezone
from typing import Tuple, Union

logger = logging.getLogger(__name__)


# =============================================================================
# CORE UTILITIES
# =============================================================================

def utc_now() -> datetime:
    """Get current datetime in UTC with timezone info."""
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """
    Convert a datetime to UTC.

    - If datetime is naive (no timezone), assumes it's already UTC
    - If datetime has timezone, converts to UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


# =============================================================================
# PARSING
# =============================================================================

_FORMATS = [
    "%Y-%m-%d %H:%M:%S",      # 2024-01-15 10:30:00
    "%Y-%m-%d",               # 2024-01-15
    "%d-%m-%Y",               # 15-01-2024
    "%d/%m/%Y %H:%M",         # 15/01/2024 10:30
    "%d/%m/%Y",               # 15/01/2024
    "%d-%m-%Y %I:%M %p",      # 15-01-2024 10:30 AM (lab report format)
]


def parse_local_datetime(value: Union[str, datetime]) -> datetime:
    """
    Parse a datetime value, keeping the offset it was written with.

    Accepts a datetime object, an ISO 8601 string (with or without timezone,
    'Z' suffix allowed) or one of the common lab report formats. Values
    without an offset come back naive.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value

    if not isinstance(value, str):
        raise ValueError(f"Expected datetime or string, got {type(value).__name__}")

    value = value.strip()

    try:
        if value.endswith('Z'):
            value = value[:-1] + '+00:00'
        return datetime.fromisoformat(value)
    except ValueError:
        pass

    for fmt in _FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    raise ValueError(f"Cannot parse datetime: '{value}'")


# =============================================================================
# FORMATTING
# =============================================================================

def format_iso(dt: datetime) -> str:
    """
    Format datetime to ISO 8601 string with 'Z' suffix.

    Example:
        >>> format_iso(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        '2024-01-15T10:30:00Z'
    """
    return to_utc(dt).strftime("%Y-%m-%dT%H:%M:%SZ")


def column_date_label(value: Union[str, datetime, None]) -> Tuple[str, str]:
    """
    Two-line label under a historical chart column: ("DD.MM.", "YYYY").

    The calendar date is the one written in the sample, not its UTC
    equivalent. Unparseable dates produce ("", "") so a single bad sample
    date never breaks the chart.
    """
    if value is None or value == "":
        return "", ""
    try:
        dt = parse_local_datetime(value)
    except ValueError as e:
        logger.warning(f"Failed to parse column date '{value}': {e}")
        return "", ""
    return dt.strftime("%d.%m."), dt.strftime("%Y")
