# File: inventory_api/services/user_service.py

"""
User registration and authentication.

Login failures are reported with one generic message whether the email is
unknown or the password is wrong, so callers cannot discover which accounts
exist.
"""

import logging
from typing import List

from pymongo import DESCENDING
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from inventory_api.core.errors import AuthError, ConflictError
from inventory_api.core.security import (
    DEFAULT_ROUNDS,
    dummy_hash,
    hash_password,
    verify_password,
)
from inventory_api.db.client import store_errors
from inventory_api.models.base import new_document
from inventory_api.models.user import USERS, to_public
from inventory_api.schemas.base import validate
from inventory_api.schemas.user import LoginRequest, UserCreate

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
EMAIL_EXISTS = "Email already exists"


def register_user(
    db: Database,
    *,
    name: str,
    email: str,
    password: str,
    rounds: int = DEFAULT_ROUNDS,
) -> dict:
    """
    Create a user and return its public projection (no password).

    Raises ValidationError for missing/malformed fields and ConflictError
    when the email is already registered.
    """
    data = validate(UserCreate, {"name": name, "email": email, "password": password})
    users = db[USERS]

    with store_errors():
        if users.find_one({"email": data.email}, {"_id": 1}) is not None:
            raise ConflictError(EMAIL_EXISTS)

        doc = new_document(
            name=data.name,
            email=data.email,
            password=hash_password(data.password, rounds),
        )
        try:
            result = users.insert_one(doc)
        except DuplicateKeyError:
            # lost a race against a concurrent registration
            raise ConflictError(EMAIL_EXISTS)

    doc["_id"] = result.inserted_id
    logger.info("[USERS] Registered user %s", result.inserted_id)
    return to_public(doc)


def authenticate_user(
    db: Database,
    *,
    email: str,
    password: str,
    rounds: int = DEFAULT_ROUNDS,
) -> dict:
    data = validate(LoginRequest, {"email": email, "password": password})

    with store_errors():
        user = db[USERS].find_one({"email": data.email})

    stored_hash = user.get("password", "") if user is not None else dummy_hash(rounds)
    if not verify_password(data.password, stored_hash) or user is None:
        logger.warning("[USERS] Failed login attempt")
        raise AuthError(INVALID_CREDENTIALS)

    return {"message": "Login successful", "name": user["name"]}


def list_users(db: Database) -> List[dict]:
    with store_errors():
        docs = db[USERS].find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
        return [to_public(d) for d in docs]
