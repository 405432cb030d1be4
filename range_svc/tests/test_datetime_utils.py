"""
Tests for datetime utilities used by chart column labels.
"""
from datetime import datetime, timedelta, timezone

import pytest

from core.datetime_utils import (
    column_date_label,
    format_iso,
    parse_local_datetime,
    to_utc,
    utc_now,
)


class TestParseLocalDatetime:

    @pytest.mark.parametrize("raw", [
        "2024-01-15",
        "2024-01-15T10:30:00",
        "2024-01-15T10:30:00Z",
        "2024-01-15 10:30:00",
        "15-01-2024",
        "15/01/2024",
        "15-01-2024 10:30 AM",
    ])
    def test_supported_formats(self, raw):
        dt = parse_local_datetime(raw)
        assert (dt.year, dt.month, dt.day) == (2024, 1, 15)

    def test_offset_is_kept(self):
        dt = parse_local_datetime("2024-01-15T00:30:00+02:00")
        assert (dt.day, dt.hour) == (15, 0)
        assert dt.utcoffset() == timedelta(hours=2)

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            parse_local_datetime("not a date")


class TestFormatting:

    def test_to_utc_naive_assumed_utc(self):
        assert to_utc(datetime(2024, 1, 1, 12)).tzinfo == timezone.utc

    def test_format_iso(self):
        dt = datetime(2024, 1, 15, 12, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_iso(dt) == "2024-01-15T10:30:00Z"

    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo == timezone.utc
        assert format_iso(utc_now()).endswith("Z")


class TestColumnDateLabel:

    def test_iso_date(self):
        assert column_date_label("2024-03-07") == ("07.03.", "2024")

    def test_datetime_object(self):
        assert column_date_label(datetime(2023, 12, 31, tzinfo=timezone.utc)) == ("31.12.", "2023")

    def test_uses_date_as_written(self):
        assert column_date_label("2024-01-15T00:30:00+02:00") == ("15.01.", "2024")
        assert column_date_label("2024-12-31T23:30:00-05:00") == ("31.12.", "2024")

    def test_unparseable(self):
        assert column_date_label("sometime") == ("", "")
        assert column_date_label("") == ("", "")
        assert column_date_label(None) == ("", "")
