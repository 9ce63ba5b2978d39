"""Order entity and its lifecycle constants."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .base import BaseEntity


class OrderStatus:
    """Well-known statuses. Admins may set any non-empty string."""

    PENDING = "Pending"


class CustomerSnapshot(BaseModel):
    """Customer details captured when the order is placed."""

    name: str = ""
    email: str
    phone: str = ""


class Order(BaseEntity):
    user_id: str = Field(..., description="Id of the owning user, from the token")
    customer: CustomerSnapshot
    items: List[Dict[str, Any]] = Field(default_factory=list)
    total: Optional[float] = None
    address: Optional[Union[str, Dict[str, Any]]] = None
    status: str = OrderStatus.PENDING
