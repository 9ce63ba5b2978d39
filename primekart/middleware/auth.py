"""Authentication dependency for FastAPI: bearer token -> principal."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header

from primekart.api.dependencies import get_token_service
from primekart.services.exceptions import UnauthenticatedError
from primekart.services.token_service import TokenClaims, TokenRejected, TokenService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# The validated token claims are the only principal a request can carry.
Principal = TokenClaims


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header value.

    Raises:
        UnauthenticatedError: If the header is missing or uses another scheme
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthenticatedError("No token provided")
    return authorization[len(BEARER_PREFIX):].strip()


def authenticate(authorization: Optional[str], tokens: TokenService) -> Principal:
    """Validate the request's bearer token and return its principal.

    Raises:
        UnauthenticatedError: If no token is present or the token is rejected
    """
    token = extract_bearer_token(authorization)
    try:
        return tokens.validate(token)
    except TokenRejected as e:
        logger.warning("Rejected token reason=%s detail=%s", e.reason.value, e)
        raise UnauthenticatedError("Invalid or expired token") from e


async def get_current_principal(
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> Principal:
    """Dependency that requires a valid bearer token."""
    return authenticate(authorization, tokens)
