# File: inventory_api/api/routes_products.py

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from inventory_api.api.deps import get_db
from inventory_api.schemas.base import MessageResponse
from inventory_api.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductUpdate,
    StockDeduction,
    StockDeductResponse,
)
from inventory_api.services import product_service

router = APIRouter()


@router.get("/products", response_model=list[ProductRead], summary="List products")
def list_products(db: Database = Depends(get_db)):
    return product_service.list_products(db)


@router.post(
    "/products",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
)
def create_product(payload: ProductCreate, db: Database = Depends(get_db)):
    return product_service.create_product(db, **payload.model_dump())


@router.post(
    "/products/stock/deduct",
    response_model=StockDeductResponse,
    summary="Deduct stock from a product",
)
def deduct_stock(payload: StockDeduction, db: Database = Depends(get_db)):
    """
    Atomically remove ``quantity`` units from a product.

    400 when the quantity is invalid or exceeds the stock on hand,
    404 when the product does not exist.
    """
    new_quantity = product_service.deduct_stock(
        db, product_id=payload.productId, quantity=payload.quantity
    )
    return StockDeductResponse(message="Stock deducted", newQuantity=new_quantity)


@router.get("/products/{product_id}", response_model=ProductRead, summary="Get product")
def get_product(product_id: str, db: Database = Depends(get_db)):
    return product_service.get_product(db, product_id)


@router.put("/products/{product_id}", response_model=ProductRead, summary="Update product")
def update_product(product_id: str, payload: ProductUpdate, db: Database = Depends(get_db)):
    return product_service.update_product(
        db, product_id, payload.model_dump(exclude_unset=True)
    )


@router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    summary="Delete product",
)
def delete_product(product_id: str, db: Database = Depends(get_db)):
    return product_service.delete_product(db, product_id)
