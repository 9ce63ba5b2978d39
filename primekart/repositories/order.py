"""Order repository for database operations"""

from typing import List, Optional

from pymongo.database import Database

from primekart.entities.base import utc_now
from primekart.entities.order import Order

from .base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """Repository for order entities"""

    def __init__(self, db: Database):
        super().__init__(db, "orders", Order)

    def create_order(self, order: Order) -> Order:
        return self.insert_one(order)

    def find_by_customer_email(self, email: str) -> List[Order]:
        """Orders placed under the given email, in store order"""
        return self.find_many({"customer.email": email})

    def list_newest_first(self) -> List[Order]:
        return self.find_many({}, sort=[("created_at", -1)])

    def list_unsorted(self, limit: int = 0) -> List[Order]:
        """Orders in whatever order the store yields them"""
        return self.find_many({}, limit=limit)

    def count_by_status(self, status: str) -> int:
        return self.count({"status": status})

    def set_status(self, order_id: str, status: str) -> Optional[Order]:
        """Set the status and return the updated order, or None if no order matched"""
        return self.update_one(order_id, {"status": status, "updated_at": utc_now()})
