"""
FastAPI application entry point for the Range Service API.

This module configures and creates the FastAPI application with:
- Structured JSON Logging: Request/response logging with request IDs
- Dependency Injection: RangeChartService injected via Depends()
- Exception Handling: Consistent error responses via setup_exception_handlers()
- CORS Middleware: Allows browser clients to fetch chart descriptions
- Lifespan Management: Catalog warm-up at startup
- Metrics Collection: In-memory request and render metrics

Architecture Overview:
    ┌─────────────────────────────────────────────────────────────┐
    │                     FastAPI Application                     │
    ├─────────────────────────────────────────────────────────────┤
    │  Middleware Stack                                           │
    │    ├── LoggingMiddleware  - Request logging & metrics       │
    │    └── CORSMiddleware     - Cross-origin support            │
    ├─────────────────────────────────────────────────────────────┤
    │  Routers (api/routers/)                                     │
    │    ├── health.py     - /health, /ready, /metrics            │
    │    ├── ranges.py     - /api/v1/ranges/*                     │
    │    └── biomarkers.py - /api/v1/biomarkers/*                 │
    ├─────────────────────────────────────────────────────────────┤
    │  RangeChartService (services/)  ← Injected via Depends()    │
    ├─────────────────────────────────────────────────────────────┤
    │  Range engine (services/ranges/) + YAML catalogs (core/)    │
    └─────────────────────────────────────────────────────────────┘
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from core.band_registry import list_biomarkers
from core.config import API_HOST, API_PORT, API_RELOAD
from core.dependencies import get_range_chart_service
from core.exceptions import setup_exception_handlers
from core.logging_config import setup_logging
from core.middleware import LoggingMiddleware
from core.status_colors import known_statuses
from api.routers import health_router, ranges_router, biomarkers_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        - Configures structured JSON logging
        - Loads the color table and band catalog so a broken YAML file
          fails the deploy instead of the first request
        - Builds the range chart service from settings

    Shutdown:
        - Logs shutdown message
    """
    setup_logging(level="INFO", json_format=True)

    logger = logging.getLogger(__name__)
    logger.info("Starting Range Service API...")

    service = get_range_chart_service()
    logger.info(
        "Catalogs loaded",
        extra={
            "statuses": len(known_statuses()),
            "biomarkers": len(list_biomarkers()),
            "high_inclusive": service.high_inclusive,
        }
    )

    yield  # Application runs here

    logger.info("Range Service API shutting down...")


app = FastAPI(
    title="Range Service API",
    description="Classify biomarker values against reference bands and describe status bars, "
                "gradients and historical trend charts.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================
setup_exception_handlers(app)

# =============================================================================
# MIDDLEWARE
# =============================================================================
# Executed in REVERSE order of registration.

# 1. CORS Middleware (innermost - closest to routes)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 2. Logging Middleware (outermost - captures all requests)
app.add_middleware(LoggingMiddleware)

# =============================================================================
# ROUTERS
# =============================================================================
app.include_router(health_router)
app.include_router(ranges_router)
app.include_router(biomarkers_router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD
    )
