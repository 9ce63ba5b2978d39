"""Product DTOs"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from primekart.entities.base import PyObjectIdStr


class ProductCreate(BaseModel):
    """New catalog entry. Extra attributes are stored alongside title and price."""

    title: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)


class ProductResponse(BaseModel):
    id: PyObjectIdStr = Field(..., validation_alias="_id")
    title: Optional[str] = None
    price: Any = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ProductCreatedResponse(BaseModel):
    message: str
    id: str
