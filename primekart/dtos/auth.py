"""Authentication DTOs"""

from pydantic import BaseModel

from .user import UserSummary


class AuthResponse(BaseModel):
    message: str
    user: UserSummary
    token: str
