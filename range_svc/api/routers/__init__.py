"""
API routers module.

This module contains all API route definitions organized by domain.
"""
from api.routers.health import router as health_router
from api.routers.ranges import router as ranges_router
from api.routers.biomarkers import router as biomarkers_router

__all__ = ["health_router", "ranges_router", "biomarkers_router"]
