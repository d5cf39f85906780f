# File: inventory_api/models/user.py

"""
User documents.

Stored shape: {_id, name, email, password (bcrypt hash), createdAt, updatedAt}
"""

from inventory_api.models.base import serialize_doc

USERS = "users"


def to_public(doc: dict) -> dict:
    """Serialize a user document without its password hash."""
    d = serialize_doc(doc)
    d.pop("password", None)
    return d
