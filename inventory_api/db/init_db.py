# File: inventory_api/db/init_db.py

"""
Database initialization helpers.

Collections are created lazily by MongoDB; here we only make sure the
indexes exist.
"""

from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database

from inventory_api.db.client import store_errors
from inventory_api.models.product import PRODUCTS
from inventory_api.models.user import USERS


def init_db(db: Database) -> None:
    """
    Create indexes. Safe to call on every startup.

    Raises StoreError if an index cannot be built (e.g. duplicate emails
    already stored).
    """
    with store_errors():
        db[USERS].create_index([("email", ASCENDING)], unique=True)
        db[USERS].create_index([("createdAt", DESCENDING)])
        db[PRODUCTS].create_index([("createdAt", DESCENDING)])
