"""
API key authentication for the Range Service.

Every /api/v1 router depends on verify_api_key. Operational endpoints
(/health, /metrics) stay open.
"""
import logging
import secrets
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from core.config import API_KEY

logger = logging.getLogger(__name__)

API_KEY_HEADER_NAME = "X-API-Key"

api_key_header = APIKeyHeader(
    name=API_KEY_HEADER_NAME,
    auto_error=False,
    description="API key for the range engine endpoints. Send it in the X-API-Key header.",
)


async def verify_api_key(
    api_key: Optional[str] = Security(api_key_header),
) -> str:
    """
    Check the X-API-Key header.

    Raises:
        HTTPException: 401 when the header is missing, 403 when the key is wrong.
    """
    if api_key is None:
        logger.warning("Range request without API key header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Include it in the X-API-Key header.",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    # Constant-time comparison
    if not secrets.compare_digest(api_key.encode(), API_KEY.encode()):
        logger.warning("Range request with invalid API key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key",
        )

    return api_key
