# File: inventory_api/services/product_service.py

"""
Product inventory operations.

Every call goes straight to the store; nothing is cached between requests.

Stock deduction is a single conditional update (match only while
``quantity >= requested``, then ``$inc``), so two concurrent deductions
cannot both pass the sufficiency check against a stale read.
"""

import logging
from typing import List, Optional

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database

from inventory_api.core.errors import InsufficientStockError, NotFoundError
from inventory_api.db.client import store_errors
from inventory_api.models.base import new_document, parse_object_id, serialize_doc, utcnow
from inventory_api.models.product import PRODUCTS
from inventory_api.schemas.base import validate
from inventory_api.schemas.product import ProductCreate, ProductUpdate, StockDeduction

logger = logging.getLogger(__name__)

NOT_FOUND = "Product not found"


def create_product(
    db: Database,
    *,
    name: str,
    price: float,
    category: str,
    image: Optional[str] = None,
    quantity: Optional[int] = None,
) -> dict:
    data = validate(
        ProductCreate,
        {
            "name": name,
            "price": price,
            "category": category,
            "image": image,
            "quantity": quantity,
        },
    )
    doc = new_document(**data.model_dump())

    with store_errors():
        result = db[PRODUCTS].insert_one(doc)

    doc["_id"] = result.inserted_id
    logger.info("[PRODUCTS] Created product %s (%s)", result.inserted_id, data.name)
    return serialize_doc(doc)


def list_products(db: Database) -> List[dict]:
    with store_errors():
        docs = db[PRODUCTS].find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
        return [serialize_doc(d) for d in docs]


def get_product(db: Database, product_id: str) -> dict:
    oid = parse_object_id(product_id, "Product")
    with store_errors():
        doc = db[PRODUCTS].find_one({"_id": oid})
    if doc is None:
        raise NotFoundError(NOT_FOUND)
    return serialize_doc(doc)


def update_product(db: Database, product_id: str, fields: dict) -> dict:
    """
    Apply a partial update and return the post-update record.

    Only the supplied fields are written. Raises NotFoundError when the id
    does not resolve.
    """
    oid = parse_object_id(product_id, "Product")
    changes = validate(ProductUpdate, fields).model_dump(exclude_none=True)
    changes["updatedAt"] = utcnow()

    with store_errors():
        doc = db[PRODUCTS].find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
    if doc is None:
        raise NotFoundError(NOT_FOUND)

    logger.info("[PRODUCTS] Updated product %s", product_id)
    return serialize_doc(doc)


def delete_product(db: Database, product_id: str) -> dict:
    oid = parse_object_id(product_id, "Product")
    with store_errors():
        result = db[PRODUCTS].delete_one({"_id": oid})
    if result.deleted_count == 0:
        raise NotFoundError(NOT_FOUND)

    logger.info("[PRODUCTS] Deleted product %s", product_id)
    return {"message": "Product deleted"}


def deduct_stock(db: Database, *, product_id: str, quantity: int) -> int:
    """
    Remove ``quantity`` units from a product and return the new quantity.

    Raises:
        ValidationError: productId missing or quantity not a positive integer.
        NotFoundError: productId does not resolve.
        InsufficientStockError: fewer than ``quantity`` units in stock; the
            stored quantity is left unchanged.
    """
    data = validate(StockDeduction, {"productId": product_id, "quantity": quantity})
    oid = parse_object_id(data.productId, "Product")
    products = db[PRODUCTS]

    with store_errors():
        doc = products.find_one_and_update(
            {"_id": oid, "quantity": {"$gte": data.quantity}},
            {"$inc": {"quantity": -data.quantity}, "$set": {"updatedAt": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            # Nothing matched: either the product is gone or stock is short
            current = products.find_one({"_id": oid}, {"quantity": 1})

    if doc is None:
        if current is None:
            raise NotFoundError(NOT_FOUND)
        raise InsufficientStockError(
            f"Insufficient stock: {current.get('quantity', 0)} available, "
            f"{data.quantity} requested"
        )

    logger.info(
        "[STOCK] Deducted %d from product %s, %d left",
        data.quantity,
        data.productId,
        doc["quantity"],
    )
    return doc["quantity"]
