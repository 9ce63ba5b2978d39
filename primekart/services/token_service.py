"""Authentication tokens: issue and validate signed, time-limited JWTs."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Literal, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenClaims(BaseModel):
    """Identity carried by a token. This is the authenticated principal."""

    id: str
    email: str
    role: Literal["admin", "user"]
    name: Optional[str] = None


class TokenRejectionReason(str, Enum):
    MALFORMED = "malformed"
    SIGNATURE_INVALID = "signature_invalid"
    EXPIRED = "expired"


class TokenRejected(Exception):
    """Raised when a token fails validation."""

    def __init__(self, reason: TokenRejectionReason, detail: str = ""):
        super().__init__(detail or reason.value)
        self.reason = reason


class TokenService:
    """Signs identity claims and validates them.

    Validity is decided by signature and expiry alone; there is no revocation
    list, so a token stays valid until ``exp`` even if the user's role changes.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] = _utc_now,
    ):
        if not secret_key:
            raise ValueError("Token signing key is required")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_delta = expires_delta
        self._clock = clock

    def issue(self, claims: TokenClaims) -> str:
        """Create a token for the given claims, expiring after the configured delta."""
        now = self._clock()
        payload: dict[str, Any] = claims.model_dump(exclude_none=True)
        payload["iat"] = now
        payload["exp"] = now + self._expires_delta
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenClaims:
        """Decode and validate a token.

        Raises:
            TokenRejected: with reason MALFORMED, SIGNATURE_INVALID or EXPIRED
        """
        try:
            jwt.get_unverified_header(token)
        except JWTError as e:
            raise TokenRejected(TokenRejectionReason.MALFORMED, str(e))

        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except ExpiredSignatureError as e:
            raise TokenRejected(TokenRejectionReason.EXPIRED, str(e))
        except JWTError as e:
            raise TokenRejected(TokenRejectionReason.SIGNATURE_INVALID, str(e))

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            raise TokenRejected(TokenRejectionReason.MALFORMED, "Missing exp claim")
        if self._clock() >= datetime.fromtimestamp(exp, tz=timezone.utc):
            raise TokenRejected(TokenRejectionReason.EXPIRED, "Token has expired")

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as e:
            raise TokenRejected(TokenRejectionReason.MALFORMED, str(e))
