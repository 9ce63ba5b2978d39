"""Catalog passthrough to the products collection."""

from typing import List

from pymongo.database import Database

from primekart.dtos import ProductCreate, ProductCreatedResponse, ProductResponse
from primekart.entities.base import utc_now
from primekart.entities.product import Product
from primekart.repositories.product import ProductRepository
from primekart.services.exceptions import InvalidInputError, NotFoundError


class ProductService:
    def __init__(self, db: Database):
        self.product_repo = ProductRepository(db)

    @staticmethod
    def _to_response(product: Product) -> ProductResponse:
        return ProductResponse.model_validate(product.model_dump())

    def list_products(self) -> List[ProductResponse]:
        return [self._to_response(p) for p in self.product_repo.list_all()]

    def get_product(self, product_id: str) -> ProductResponse:
        if not self.product_repo.is_valid_id(product_id):
            raise InvalidInputError("Invalid product ID")
        product = self.product_repo.find_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return self._to_response(product)

    def create_product(self, payload: ProductCreate) -> ProductCreatedResponse:
        data = payload.model_dump()
        # Server-owned fields are never taken from the client
        for key in ("_id", "id", "updated_at"):
            data.pop(key, None)
        data["created_at"] = utc_now()
        created = self.product_repo.create_product(Product(**data))
        return ProductCreatedResponse(message="Product added", id=str(created.id))

    def delete_product(self, product_id: str) -> None:
        if not self.product_repo.delete_one(product_id):
            raise NotFoundError("Product not found")
