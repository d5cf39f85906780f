# File: inventory_api/models/product.py

"""
Product documents.

Stored shape: {_id, name, price, category, quantity, image, createdAt, updatedAt}
Invariant: quantity >= 0.
"""

PRODUCTS = "products"

DEFAULT_QUANTITY = 0
DEFAULT_IMAGE = ""
