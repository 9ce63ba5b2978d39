from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import Field

from .base import BaseEntity


class User(BaseEntity):
    """User account. ``email`` is stored lower-cased and is unique."""

    email: str
    name: str
    password: str = Field(..., description="bcrypt hash, never serialized outward")
    role: Literal["admin", "user"] = "user"
    phone: Optional[str] = None
    address: Optional[Union[str, dict]] = None
    photo_url: Optional[str] = None
