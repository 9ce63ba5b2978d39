"""Admin summary DTOs"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .order import OrderResponse


class AdminSummaryResponse(BaseModel):
    products: int
    users: int
    orders: int
    pending: int
    recent_orders: List[OrderResponse] = Field(default_factory=list, alias="recentOrders")

    model_config = ConfigDict(populate_by_name=True)
