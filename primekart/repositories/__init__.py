from .base import BaseRepository
from .order import OrderRepository
from .product import ProductRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "OrderRepository",
    "ProductRepository",
    "UserRepository",
]
