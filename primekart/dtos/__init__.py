"""Data Transfer Objects (DTOs) for API requests and responses"""

from .auth import AuthResponse
from .dashboard import AdminSummaryResponse
from .order import (
    CustomerInfo,
    OrderCreate,
    OrderPlacedResponse,
    OrderResponse,
    OrderStatusUpdate,
)
from .product import ProductCreate, ProductCreatedResponse, ProductResponse
from .user import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
    UserSummary,
    UserUpdate,
)

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    # Users
    "MessageResponse",
    "UserResponse",
    "UserSummary",
    "UserUpdate",
    # Orders
    "CustomerInfo",
    "OrderCreate",
    "OrderPlacedResponse",
    "OrderResponse",
    "OrderStatusUpdate",
    # Products
    "ProductCreate",
    "ProductCreatedResponse",
    "ProductResponse",
    # Admin
    "AdminSummaryResponse",
]
