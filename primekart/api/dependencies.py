"""FastAPI dependencies for the process-wide handles stored on ``app.state``."""

from fastapi import Request

from primekart.database.mongo import get_db
from primekart.services.password import PasswordHasher
from primekart.services.token_service import TokenService

__all__ = ["get_db", "get_password_hasher", "get_token_service"]


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher
