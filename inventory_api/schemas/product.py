# File: inventory_api/schemas/product.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from inventory_api.models.product import DEFAULT_IMAGE, DEFAULT_QUANTITY
from inventory_api.schemas.base import TrimmedStr


class ProductBase(BaseModel):
    name: TrimmedStr
    price: float = Field(..., ge=0, allow_inf_nan=False)
    category: TrimmedStr
    quantity: int = Field(DEFAULT_QUANTITY, ge=0)
    image: str = DEFAULT_IMAGE


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    """
    Partial update. Only supplied fields are written; quantity may never be
    set below zero.
    """

    name: Optional[TrimmedStr] = None
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    category: Optional[TrimmedStr] = None
    quantity: Optional[int] = Field(None, ge=0)
    image: Optional[str] = None


class ProductRead(ProductBase):
    id: str
    createdAt: datetime
    updatedAt: datetime


class StockDeduction(BaseModel):
    productId: TrimmedStr
    quantity: int = Field(..., gt=0, strict=True)


class StockDeductResponse(BaseModel):
    message: str
    newQuantity: int
