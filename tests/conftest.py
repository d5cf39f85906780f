# File: tests/conftest.py

"""
Shared fixtures.

The real MongoClient is swapped for mongomock so the suite runs without a
server. To run:
    pytest -q
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from inventory_api.core.config import Settings
from inventory_api.db.init_db import init_db
from inventory_api.main import create_application


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mongodb_uri="mongodb://localhost:27017",
        database_name="inventory_test",
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient(tz_aware=True)


@pytest.fixture
def db(mongo_client, settings):
    database = mongo_client[settings.database_name]
    init_db(database)
    return database


@pytest.fixture
def client(settings, mongo_client):
    app = create_application(settings, mongo_client=mongo_client)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def widget(client) -> dict:
    resp = client.post(
        "/api/products",
        json={"name": "Widget", "price": 9.99, "category": "tools", "quantity": 10},
    )
    assert resp.status_code == 201
    return resp.json()
