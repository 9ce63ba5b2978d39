from .base import BaseEntity, PyObjectId, PyObjectIdStr
from .order import CustomerSnapshot, Order, OrderStatus
from .product import Product
from .user import User

__all__ = [
    # Base
    "BaseEntity",
    "PyObjectId",
    "PyObjectIdStr",
    # Entities
    "CustomerSnapshot",
    "Order",
    "OrderStatus",
    "Product",
    "User",
]
