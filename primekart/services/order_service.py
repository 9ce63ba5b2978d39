"""Order lifecycle: placement, ownership-scoped reads, and admin status changes.

Orders start as ``Pending``. After that an admin may set any non-empty status
string, including ``Pending`` again; there is no transition graph. The order
total is taken from the client as-is.
"""

from __future__ import annotations

import logging
from typing import List

from pymongo.database import Database

from primekart.dtos import (
    AdminSummaryResponse,
    OrderCreate,
    OrderPlacedResponse,
    OrderResponse,
)
from primekart.entities.base import utc_now
from primekart.entities.order import CustomerSnapshot, Order, OrderStatus
from primekart.middleware.auth import Principal
from primekart.middleware.rbac import ensure_admin, ensure_email_match
from primekart.repositories.order import OrderRepository
from primekart.repositories.product import ProductRepository
from primekart.repositories.user import UserRepository
from primekart.services.exceptions import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

RECENT_ORDERS_LIMIT = 6


class OrderService:
    """Service for order placement and tracking."""

    def __init__(self, db: Database):
        self.order_repo = OrderRepository(db)
        self.product_repo = ProductRepository(db)
        self.user_repo = UserRepository(db)

    @staticmethod
    def _to_response(order: Order) -> OrderResponse:
        return OrderResponse.model_validate(order.model_dump())

    def place_order(self, principal: Principal, payload: OrderCreate) -> OrderPlacedResponse:
        """Create a Pending order owned by the principal.

        The customer email always comes from the token; a client-supplied
        ``customer.email`` is ignored.
        """
        if not payload.items:
            raise InvalidInputError("Cart is empty")

        customer = payload.customer
        order = Order(
            user_id=principal.id,
            customer=CustomerSnapshot(
                name=(customer.name if customer else None) or "",
                email=principal.email,
                phone=(customer.phone if customer else None) or "",
            ),
            items=payload.items,
            total=payload.total,
            address=payload.address,
            status=OrderStatus.PENDING,
            created_at=utc_now(),
        )
        created = self.order_repo.create_order(order)
        logger.info("Order placed id=%s user_id=%s", created.id, principal.id)
        return OrderPlacedResponse(message="Order placed", order_id=str(created.id))

    def list_orders_for_user(self, principal: Principal, email: str) -> List[OrderResponse]:
        """Orders placed under the principal's own email, in store order."""
        ensure_email_match(principal, email)
        return [self._to_response(o) for o in self.order_repo.find_by_customer_email(email)]

    def list_all_orders(self, principal: Principal) -> List[OrderResponse]:
        """Every order, newest first. Admin only."""
        ensure_admin(principal)
        return [self._to_response(o) for o in self.order_repo.list_newest_first()]

    def update_order_status(
        self, principal: Principal, order_id: str, new_status: str | None
    ) -> OrderResponse:
        """Set an order's status and return the updated order. Admin only.

        Surrounding whitespace is trimmed before the status is stored, so
        ``"  Shipped "`` is saved as ``"Shipped"``. A blank status is rejected.
        """
        ensure_admin(principal)

        new_status = (new_status or "").strip()
        if not new_status:
            raise InvalidInputError("Status is required")

        order = self.order_repo.set_status(order_id, new_status)
        if not order:
            raise NotFoundError("Order not found")

        logger.info(
            "Order status updated id=%s status=%s by=%s", order_id, new_status, principal.id
        )
        return self._to_response(order)

    def summary(self, principal: Principal) -> AdminSummaryResponse:
        """Store-wide counts plus a slice of orders. Admin only.

        ``recent_orders`` is the first few orders in store order, not sorted
        by creation time.
        """
        ensure_admin(principal)
        recent = self.order_repo.list_unsorted(limit=RECENT_ORDERS_LIMIT)
        return AdminSummaryResponse(
            products=self.product_repo.count(),
            users=self.user_repo.count(),
            orders=self.order_repo.count(),
            pending=self.order_repo.count_by_status(OrderStatus.PENDING),
            recent_orders=[self._to_response(o) for o in recent],
        )
