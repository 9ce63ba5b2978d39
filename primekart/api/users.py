"""User registration, login and profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status
from pymongo.database import Database

from primekart.api.dependencies import get_db, get_password_hasher, get_token_service
from primekart.dtos import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
    UserUpdate,
)
from primekart.middleware.auth import Principal, get_current_principal
from primekart.middleware.rbac import require_edit_own_profile
from primekart.services.auth_service import AuthService
from primekart.services.password import PasswordHasher
from primekart.services.token_service import TokenService
from primekart.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    db: Database = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    service = AuthService(db, hasher, tokens)
    return service.register(payload)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    db: Database = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    service = AuthService(db, hasher, tokens)
    return service.login(payload)


@router.get("/me", response_model=UserResponse)
def get_current_user(
    principal: Principal = Depends(get_current_principal),
    db: Database = Depends(get_db),
):
    service = UserService(db)
    return service.get_profile(principal)


@router.put("/{user_id}", response_model=MessageResponse)
def update_user(
    payload: UserUpdate,
    user_id: str = Path(..., description="User ID"),
    principal: Principal = Depends(require_edit_own_profile),
    db: Database = Depends(get_db),
):
    """Update profile fields. Allowed for the user themselves or an admin."""
    service = UserService(db)
    return service.update_profile(principal, user_id, payload)
