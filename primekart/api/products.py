"""Public catalog endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Path
from pymongo.database import Database

from primekart.api.dependencies import get_db
from primekart.dtos import ProductResponse
from primekart.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductResponse])
def list_products(db: Database = Depends(get_db)):
    service = ProductService(db)
    return service.list_products()


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str = Path(..., description="Product ID"),
    db: Database = Depends(get_db),
):
    service = ProductService(db)
    return service.get_product(product_id)
