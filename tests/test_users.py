# File: tests/test_users.py

import pytest

from inventory_api.core.errors import ConflictError, ValidationError
from inventory_api.core.security import verify_password
from inventory_api.services.user_service import list_users, register_user


def _register(client, name="Ada", email="ada@example.com", password="secret1"):
    return client.post("/api/users", json={"name": name, "email": email, "password": password})


def test_register_returns_public_projection(client, db):
    resp = _register(client, name="  Ada  ")
    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "Ada"
    assert body["email"] == "ada@example.com"
    assert "id" in body
    assert "password" not in body

    stored = db["users"].find_one({"email": "ada@example.com"})
    assert stored["password"] != "secret1"
    assert verify_password("secret1", stored["password"])


def test_register_duplicate_email_is_rejected(client):
    assert _register(client).status_code == 201

    resp = _register(client, name="Someone Else", email="ADA@example.com", password="another1")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Email already exists"


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "ada@example.com", "password": "secret1"},
        {"name": "Ada", "password": "secret1"},
        {"name": "Ada", "email": "ada@example.com"},
        {"name": "   ", "email": "ada@example.com", "password": "secret1"},
        {"name": "Ada", "email": "not-an-email", "password": "secret1"},
        {"name": "Ada", "email": "ada@example.com", "password": "123"},
    ],
)
def test_register_invalid_input(client, payload):
    resp = client.post("/api/users", json=payload)
    assert resp.status_code == 400


def test_list_users_newest_first_without_passwords(client):
    _register(client, name="First", email="first@example.com")
    _register(client, name="Second", email="second@example.com")

    resp = client.get("/api/users")
    assert resp.status_code == 200
    users = resp.json()
    assert [u["name"] for u in users] == ["Second", "First"]
    assert all("password" not in u for u in users)


def test_register_user_service(db):
    user = register_user(db, name="Grace", email="Grace@Example.com", password="hopper!", rounds=4)
    assert user["email"] == "grace@example.com"

    with pytest.raises(ConflictError):
        register_user(db, name="Other", email="grace@example.com", password="xxxxxx", rounds=4)

    with pytest.raises(ValidationError):
        register_user(db, name="Grace", email=None, password="hopper!", rounds=4)

    assert [u["email"] for u in list_users(db)] == ["grace@example.com"]
