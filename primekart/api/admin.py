"""Admin-only catalog, order and summary endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status
from pymongo.database import Database

from primekart.api.dependencies import get_db
from primekart.dtos import (
    AdminSummaryResponse,
    MessageResponse,
    OrderResponse,
    OrderStatusUpdate,
    ProductCreate,
    ProductCreatedResponse,
)
from primekart.middleware.auth import Principal
from primekart.middleware.rbac import (
    require_manage_orders,
    require_manage_products,
    require_view_summary,
)
from primekart.services.order_service import OrderService
from primekart.services.product_service import ProductService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/products",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductCreate,
    db: Database = Depends(get_db),
    _admin: Principal = Depends(require_manage_products),
):
    service = ProductService(db)
    return service.create_product(payload)


@router.delete("/products/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: str = Path(..., description="Product ID"),
    db: Database = Depends(get_db),
    _admin: Principal = Depends(require_manage_products),
):
    service = ProductService(db)
    service.delete_product(product_id)
    return MessageResponse(message="Product deleted")


@router.get("/orders", response_model=List[OrderResponse])
def list_all_orders(
    db: Database = Depends(get_db),
    admin: Principal = Depends(require_manage_orders),
):
    """All orders, newest first."""
    service = OrderService(db)
    return service.list_all_orders(admin)


@router.put("/orders/{order_id}", response_model=OrderResponse)
@router.put("/orders/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    payload: OrderStatusUpdate,
    order_id: str = Path(..., description="Order ID"),
    db: Database = Depends(get_db),
    admin: Principal = Depends(require_manage_orders),
):
    """Set an order's status and return the updated order."""
    service = OrderService(db)
    return service.update_order_status(admin, order_id, payload.status)


@router.get("/summary", response_model=AdminSummaryResponse)
def summary(
    db: Database = Depends(get_db),
    admin: Principal = Depends(require_view_summary),
):
    service = OrderService(db)
    return service.summary(admin)
