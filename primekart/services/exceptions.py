"""Domain errors raised by services and mapped to HTTP responses by the exception handlers."""

from __future__ import annotations

from fastapi import status


class PrimeKartError(Exception):
    """Base exception for expected request failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(PrimeKartError):
    """Missing or malformed request fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthenticatedError(PrimeKartError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(PrimeKartError):
    """Authenticated but not allowed."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(PrimeKartError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
