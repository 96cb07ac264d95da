import secrets
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.config.config import config

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def verify_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)):
    """
    Guard the query routes with the API token, when one is configured.

    With API_TOKEN unset the API is open. Otherwise the request needs an
    ``Authorization: Bearer <token>`` header carrying that exact token.

    Returns:
        True once the caller is allowed through

    Raises:
        HTTPException: 401 with a Bearer challenge for a missing or wrong token
    """
    expected = config.api_token
    if not expected:
        return True

    if credentials is None:
        raise _unauthorized("Authentication required. Please provide a valid Bearer token.")

    if not secrets.compare_digest(credentials.credentials.encode(), expected.encode()):
        raise _unauthorized("Invalid authentication token.")

    return True
