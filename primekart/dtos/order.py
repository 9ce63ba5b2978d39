"""Order DTOs"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from primekart.entities.base import PyObjectIdStr


class CustomerInfo(BaseModel):
    """Client-supplied customer details. ``email`` is accepted but ignored."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class OrderCreate(BaseModel):
    customer: Optional[CustomerInfo] = None
    items: Optional[List[Dict[str, Any]]] = None
    total: Optional[float] = None
    address: Optional[Union[str, Dict[str, Any]]] = None

    model_config = ConfigDict(extra="forbid")


class OrderStatusUpdate(BaseModel):
    status: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class OrderPlacedResponse(BaseModel):
    message: str
    order_id: str = Field(..., alias="orderId")

    model_config = ConfigDict(populate_by_name=True)


class CustomerResponse(BaseModel):
    name: str = ""
    email: str
    phone: str = ""


class OrderResponse(BaseModel):
    id: PyObjectIdStr = Field(..., validation_alias="_id")
    user_id: str
    customer: CustomerResponse
    items: List[Dict[str, Any]] = Field(default_factory=list)
    total: Optional[float] = None
    address: Optional[Union[str, Dict[str, Any]]] = None
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)
