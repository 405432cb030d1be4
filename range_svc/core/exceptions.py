"""
Shared exception classes and error handling utilities for the Range Service.

This module provides:
- Custom exception hierarchy for domain-specific errors
- Consistent error response formatting
- Exception handlers for FastAPI integration

The range engine itself never raises on malformed band data; these
exceptions cover the service boundary (layout parameters, catalog lookups).

Usage:
    from core.exceptions import UnknownBiomarkerError

    raise UnknownBiomarkerError(biomarker="ferritin")
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# =============================================================================
# BASE EXCEPTION CLASS
# =============================================================================

class RangeServiceError(Exception):
    """
    Base exception for all Range Service domain errors.

    Provides consistent error structure with status code and detail message.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs: Any
    ):
        """
        Initialize the exception.

        Args:
            detail: Human-readable error message. Uses class default if not provided.
            status_code: HTTP status code. Uses class default if not provided.
            **kwargs: Additional context to include in error response.
        """
        self.detail = detail or self.__class__.detail
        self.status_code = status_code or self.__class__.status_code
        self.context = kwargs
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        result = {"detail": self.detail}
        if self.context:
            result["context"] = self.context
        return result


# =============================================================================
# DOMAIN EXCEPTIONS
# =============================================================================

class InvalidLayoutError(RangeServiceError):
    """Raised when layout parameters cannot produce a chart (non-positive extent or spacing)."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid layout parameters"


class UnknownBiomarkerError(RangeServiceError):
    """Raised when a biomarker is not in the reference band catalog."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Biomarker not found"

    def __init__(self, biomarker: Optional[str] = None, **kwargs: Any):
        detail = f"Biomarker '{biomarker}' not found" if biomarker else self.detail
        super().__init__(detail=detail, biomarker=biomarker, **kwargs)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def range_service_exception_handler(
    request: Request,
    exc: RangeServiceError
) -> JSONResponse:
    """Log a RangeServiceError and return a standardized JSON error response."""
    logger.warning(
        f"RangeServiceError: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "context": exc.context
        }
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Example:
        app = FastAPI()
        setup_exception_handlers(app)
    """
    app.add_exception_handler(RangeServiceError, range_service_exception_handler)
