"""Customer order endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path, status
from pymongo.database import Database

from primekart.api.dependencies import get_db
from primekart.dtos import OrderCreate, OrderPlacedResponse, OrderResponse
from primekart.middleware.auth import Principal
from primekart.middleware.rbac import require_place_orders, require_view_own_orders
from primekart.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    response_model=OrderPlacedResponse,
    status_code=status.HTTP_201_CREATED,
)
def place_order(
    payload: OrderCreate,
    principal: Principal = Depends(require_place_orders),
    db: Database = Depends(get_db),
):
    service = OrderService(db)
    return service.place_order(principal, payload)


@router.get("/{email}", response_model=List[OrderResponse])
def list_my_orders(
    email: str = Path(..., description="Email the orders were placed under"),
    principal: Principal = Depends(require_view_own_orders),
    db: Database = Depends(get_db),
):
    """List the caller's orders. The path email must match the token email."""
    service = OrderService(db)
    return service.list_orders_for_user(principal, email)
