#!/usr/bin/env python3
"""
UX Preview Script for stacked range charts

This script generates a standalone HTML file for visual inspection of the
RangeChartService output. It is NOT a test: no assertions, no pass/fail.

Purpose:
- Check band row colors and the right-edge bound captions
- Review connector dashes between samples that change rows
- Inspect markers for repeated status labels (Vitamin D uses "Ok" twice)
- Verify column date labels

Usage:
    python preview_chart.py

Output:
    range_chart_preview.html (in project root)
"""

import sys
from pathlib import Path
from datetime import date, timedelta

# Ensure the package is importable when running from range_svc directory
sys.path.insert(0, str(Path(__file__).parent))

from core.band_registry import get_biomarker
from services import RangeChartService
from services.ranges.classifier import resolve_band
from services.ranges.models import Sample


def create_sample_series(bands) -> list[Sample]:
    """
    Vitamin D readings over roughly a year and a half.

    Covers deficient, insufficient, optimal and high values so every row
    and both "Ok" bands receive a marker.
    """
    base_date = date.today() - timedelta(days=540)
    readings = [
        (0, 14.0),      # Deficient
        (90, 24.5),     # Insufficient
        (180, 38.0),    # Optimal
        (270, 52.0),    # Optimal
        (360, 71.0),    # High
        (450, 44.0),    # Optimal
    ]

    series = []
    for days, value in readings:
        band = resolve_band(value, bands)
        series.append(Sample(
            value=value,
            status=band.status if band else "",
            date=(base_date + timedelta(days=days)).isoformat(),
        ))
    return series


def generate_preview():
    """Generate the HTML preview file."""
    print("=" * 60)
    print("Range Chart UX Preview Generator")
    print("=" * 60)

    biomarker = get_biomarker("vitamin d")
    bands = list(biomarker.bands)
    series = create_sample_series(bands)
    print(f"\n✓ Created {len(series)} {biomarker.display_name} samples against {len(bands)} bands")

    service = RangeChartService()
    html_content = service.render_trend_html(
        series,
        bands,
        title=biomarker.display_name,
        unit=biomarker.unit,
    )
    print(f"\n✓ Generated HTML chart ({len(html_content):,} bytes)")

    output_path = Path(__file__).parent.parent / "range_chart_preview.html"
    output_path.write_text(html_content, encoding="utf-8")
    print(f"\n✓ Saved to: {output_path.resolve()}")
    print(f"  file://{output_path.resolve()}")
    print("=" * 60)

    return str(output_path)


if __name__ == "__main__":
    generate_preview()
