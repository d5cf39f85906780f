# File: tests/test_app.py

import mongomock
import pytest
from fastapi.testclient import TestClient
from mongomock.collection import Collection
from pymongo.errors import PyMongoError

from inventory_api import main
from inventory_api.core.config import Settings
from inventory_api.core.errors import StoreError
from inventory_api.core.security import hash_password, verify_password
from inventory_api.db.client import create_client
from inventory_api.main import create_application


def test_root_health_message(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "running" in resp.text


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "inventory_test"}


def test_missing_connection_string_is_fatal():
    settings = Settings(mongodb_uri=None)
    with pytest.raises(StoreError):
        create_client(settings)

    app = create_application(settings)
    with pytest.raises(StoreError):
        with TestClient(app):
            pass


def test_cors_origins_from_string():
    settings = Settings(backend_cors_origins="http://a.example, http://b.example")
    assert settings.backend_cors_origins == ["http://a.example", "http://b.example"]


def test_bcrypt_rounds_range():
    with pytest.raises(ValueError):
        Settings(bcrypt_rounds=3)


def test_password_hashing():
    hashed = hash_password("secret1", rounds=4)
    assert hashed != "secret1"
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)
    assert not verify_password("secret1", "not-a-bcrypt-hash")


def _store_down(*args, **kwargs):
    raise PyMongoError("server down")


@pytest.mark.parametrize(
    "method, attr, path, body",
    [
        ("get", "find", "/api/products", None),
        ("get", "find", "/api/users", None),
        ("post", "insert_one", "/api/products", {"name": "X", "price": 1, "category": "c"}),
        ("post", "find_one", "/api/login", {"email": "ada@example.com", "password": "secret1"}),
        (
            "post",
            "find_one_and_update",
            "/api/products/stock/deduct",
            {"productId": "65a000000000000000000000", "quantity": 1},
        ),
    ],
)
def test_store_failure_is_500_with_message(client, monkeypatch, method, attr, path, body):
    monkeypatch.setattr(Collection, attr, _store_down)

    kwargs = {"json": body} if body is not None else {}
    resp = getattr(client, method)(path, **kwargs)

    assert resp.status_code == 500
    assert resp.json() == {"detail": "server down"}


class TrackingClient(mongomock.MongoClient):
    closed = False

    def close(self):
        self.closed = True
        super().close()


def test_owned_client_closed_when_startup_fails(settings, monkeypatch):
    owned = TrackingClient()

    def failing_init_db(db):
        raise StoreError("index build failed")

    monkeypatch.setattr(main, "create_client", lambda s: owned)
    monkeypatch.setattr(main, "init_db", failing_init_db)

    app = main.create_application(settings)
    with pytest.raises(StoreError):
        with TestClient(app):
            pass

    assert owned.closed
