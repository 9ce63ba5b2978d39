"""Registration and login."""

from __future__ import annotations

import logging

from pymongo.database import Database

from primekart.dtos import AuthResponse, LoginRequest, RegisterRequest, UserSummary
from primekart.entities.user import User
from primekart.repositories.user import EmailAlreadyRegistered, UserRepository
from primekart.services.exceptions import InvalidInputError, UnauthenticatedError
from primekart.services.password import PasswordHasher
from primekart.services.token_service import TokenClaims, TokenService

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class AuthService:
    """Creates accounts and exchanges credentials for tokens."""

    def __init__(self, db: Database, hasher: PasswordHasher, tokens: TokenService):
        self.user_repo = UserRepository(db)
        self.hasher = hasher
        self.tokens = tokens

    def register(self, payload: RegisterRequest) -> AuthResponse:
        if len(payload.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidInputError("Password is too long")

        if self.user_repo.find_by_email(payload.email):
            raise InvalidInputError("User already exists")

        try:
            user = self.user_repo.create_user(
                name=payload.name,
                email=payload.email,
                password_hash=self.hasher.hash(payload.password),
            )
        except EmailAlreadyRegistered:
            # Lost a race with a concurrent registration
            raise InvalidInputError("User already exists")

        logger.info("Registered user id=%s", user.id)
        return self._issue(user, "User registered")

    def login(self, payload: LoginRequest) -> AuthResponse:
        user = self.user_repo.find_by_email(payload.email)
        if not user or not self.hasher.verify(payload.password, user.password):
            raise UnauthenticatedError("Invalid credentials")
        return self._issue(user, "Login successful")

    def _issue(self, user: User, message: str) -> AuthResponse:
        summary = UserSummary(id=str(user.id), name=user.name, email=user.email, role=user.role)
        token = self.tokens.issue(TokenClaims(**summary.model_dump()))
        return AuthResponse(message=message, user=summary, token=token)
