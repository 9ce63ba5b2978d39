"""Product repository for database operations"""

from typing import List

from pymongo.database import Database

from primekart.entities.product import Product

from .base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for catalog products"""

    def __init__(self, db: Database):
        super().__init__(db, "products", Product)

    def list_all(self) -> List[Product]:
        return self.find_many({})

    def create_product(self, product: Product) -> Product:
        return self.insert_one(product)
