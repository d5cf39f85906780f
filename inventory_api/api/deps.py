# File: inventory_api/api/deps.py

from fastapi import Request
from pymongo.database import Database

from inventory_api.core.config import Settings


def get_db(request: Request) -> Database:
    """
    FastAPI dependency that provides the database handle opened by the
    application lifespan.

    Usage in route functions:
        db: Database = Depends(get_db)
    """
    return request.app.state.db


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
