"""User and authentication DTOs"""

from datetime import datetime
from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints

from primekart.entities.base import PyObjectIdStr


def require_at_sign(value: str) -> str:
    local, _, domain = value.partition("@")
    if not local or not domain:
        raise ValueError("Invalid email address")
    return value


# Length limits apply to the stripped value
Email = Annotated[
    str,
    StringConstraints(strip_whitespace=True, to_lower=True, min_length=3, max_length=254),
    AfterValidator(require_at_sign),
]


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: Email
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


class LoginRequest(BaseModel):
    email: Email
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


class UserUpdate(BaseModel):
    """Mutable profile fields. ``role``, ``password`` and anything else are dropped."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = None
    address: Optional[Union[str, Dict]] = None
    photo_url: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class UserSummary(BaseModel):
    """User identity as embedded in auth responses."""

    id: str
    name: str
    email: str
    role: Literal["admin", "user"]


class UserResponse(BaseModel):
    id: PyObjectIdStr = Field(..., validation_alias="_id")
    email: str
    name: str
    role: Literal["admin", "user"] = "user"
    phone: Optional[str] = None
    address: Optional[Union[str, Dict]] = None
    photo_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
