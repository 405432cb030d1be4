"""
Tests for settings validation.
"""
import logging

import pytest
from pydantic import ValidationError

from core.config import Settings

VALID_KEY = "k" * 32


def test_defaults():
    settings = Settings(range_svc_api_key=VALID_KEY, _env_file=None)
    assert settings.range_svc_high_inclusive is True
    assert settings.range_svc_axis_extent == 70
    assert settings.range_svc_column_spacing == 43
    assert settings.range_svc_column_offset == 10
    assert settings.range_svc_connector_stroke == "#888888"
    assert settings.range_svc_connector_dash == "2,2"


def test_short_api_key_rejected():
    with pytest.raises(ValidationError):
        Settings(range_svc_api_key="too-short", _env_file=None)


@pytest.mark.parametrize("field", ["range_svc_axis_extent", "range_svc_column_spacing"])
def test_non_positive_layout_rejected(field):
    with pytest.raises(ValidationError):
        Settings(range_svc_api_key=VALID_KEY, _env_file=None, **{field: 0})


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("RANGE_SVC_HIGH_INCLUSIVE", "false")
    monkeypatch.setenv("RANGE_SVC_COLUMN_SPACING", "60")
    settings = Settings(range_svc_api_key=VALID_KEY, _env_file=None)
    assert settings.range_svc_high_inclusive is False
    assert settings.range_svc_column_spacing == 60


def test_exclusive_bounds_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="core.config"):
        Settings(range_svc_api_key=VALID_KEY, range_svc_high_inclusive=False, _env_file=None)
    assert "RANGE_SVC_HIGH_INCLUSIVE is off" in caplog.text
