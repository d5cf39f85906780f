# File: inventory_api/db/client.py

"""
MongoDB client lifecycle.

The application lifespan owns the client: it is created (and pinged) at
startup, attached to ``app.state`` and closed at shutdown. Routes reach the
database through ``inventory_api.api.deps.get_db``.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from inventory_api.core.config import Settings
from inventory_api.core.errors import StoreError

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> MongoClient:
    """
    Open a client and verify the server is reachable.

    Raises StoreError when the connection string is missing or the initial
    ping fails; the caller treats that as fatal.
    """
    if not settings.mongodb_uri:
        logger.critical("[DB] MONGODB_URI is not set")
        raise StoreError("MONGODB_URI is not set")

    client: MongoClient = MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
        tz_aware=True,
    )
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        logger.critical("[DB] Connection error: %s", exc)
        raise StoreError(f"Could not connect to MongoDB: {exc}") from exc

    logger.info("[DB] MongoDB connected (database=%s)", settings.database_name)
    return client


@contextmanager
def store_errors() -> Iterator[None]:
    """Translate driver failures into StoreError, passing the message through."""
    try:
        yield
    except PyMongoError as exc:
        logger.error("[DB] Store error: %s", exc)
        raise StoreError(str(exc)) from exc
