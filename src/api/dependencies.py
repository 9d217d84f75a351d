"""FastAPI dependencies for authentication."""

import secrets

from fastapi import Header, HTTPException, status

from api.models.responses import ErrorCodes
from core.config import WORKLOAD_API_KEY


async def verify_api_key(x_api_key: str = Header(..., alias="X-API-Key")) -> str:
    """
    Verify API key from X-API-Key header.

    Raises:
        HTTPException: 500 if no key is configured, 401 if the key doesn't match
    """
    if not WORKLOAD_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "API key not configured on server",
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    if not secrets.compare_digest(x_api_key.encode(), WORKLOAD_API_KEY.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "Invalid or missing API key",
                "code": ErrorCodes.UNAUTHORIZED,
                "details": [],
            },
        )

    return x_api_key
