"""
Shared pytest fixtures for range engine and API tests.

Key patterns:

1. Fresh inputs: every test builds its own BandSet; the engine is stateless
2. DI Override: app.dependency_overrides injects a test RangeChartService
3. Auth bypass: verify_api_key is overridden except in test_auth.py

Fixture Hierarchy:
    bands → range_service → test_app → client
"""
import os
import pytest
from fastapi.testclient import TestClient
from fastapi import FastAPI

# Set test API key before importing config modules
# This must happen before any config imports
TEST_API_KEY = "test-api-key-for-testing-purposes-12345678"
os.environ.setdefault("RANGE_SVC_API_KEY", TEST_API_KEY)

from core.exceptions import setup_exception_handlers
from core import dependencies as deps
from core.auth import verify_api_key
from services import RangeChartService
from services.ranges.models import Band, Sample


@pytest.fixture
def low_ok_high_bands():
    """Three adjacent bands: open below 100, 100-200, open above 200."""
    return [
        Band(low=None, high=100, status="Low"),
        Band(low=100, high=200, status="Ok"),
        Band(low=200, high=None, status="High"),
    ]


@pytest.fixture
def vitamin_d_bands():
    """Five bands where "Ok" and "Needs Focus" each appear twice, listed out of order."""
    return [
        Band(low=30, high=60, status="Excellent", label="Optimal"),
        Band(low=None, high=20, status="Needs Focus", label="Deficient"),
        Band(low=100, high=None, status="Needs Focus", label="Toxic"),
        Band(low=20, high=30, status="Ok", label="Insufficient"),
        Band(low=60, high=100, status="Ok", label="High"),
    ]


@pytest.fixture
def low_ok_high_series():
    return [
        Sample(value=50, status="Low", date="2024-01-10"),
        Sample(value=150, status="Ok", date="2024-04-02"),
        Sample(value=250, status="High", date="2024-09-21"),
    ]


@pytest.fixture
def range_service():
    """A RangeChartService with default layout and inclusive upper bounds."""
    return RangeChartService(high_inclusive=True)


@pytest.fixture
def test_app(range_service):
    """
    Create a FastAPI test app with dependency overrides.

    - Uses the real routers (testing actual endpoint code)
    - Injects the test service via dependency_overrides
    - Registers exception handlers for proper error response testing
    """
    from api.routers import health_router, ranges_router, biomarkers_router

    app = FastAPI(title="Range Service API Test")

    setup_exception_handlers(app)

    app.dependency_overrides[deps.get_range_chart_service] = lambda: range_service

    # Override auth to skip API key verification in tests
    async def skip_auth():
        return TEST_API_KEY
    app.dependency_overrides[verify_api_key] = skip_auth

    app.include_router(health_router)
    app.include_router(ranges_router)
    app.include_router(biomarkers_router)

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Create a test client for the API."""
    return TestClient(test_app)
