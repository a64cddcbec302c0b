"""Bearer token authentication for the planting API.

Every router depends on ``verify_token``. A server started without
``API_TOKEN`` answers 503 instead of accepting or crashing on requests.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from planting_risk.auth.config import settings

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_api_token() -> str:
    """Return the configured API token.

    Raises
    ------
    HTTPException
        503 if API_TOKEN is not configured or is empty.
    """
    token = settings.API_TOKEN
    if not token:
        logger.error("API_TOKEN is not configured; rejecting request")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="API authentication is not configured on this server",
        )
    return token


def verify_token(credentials: HTTPAuthorizationCredentials = Security(security)) -> str:
    """Check the Bearer token of a planting API request.

    Raises
    ------
    HTTPException
        503 when no token is configured, 403 when the token does not match.
    """
    if credentials.credentials != get_api_token():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials
