"""Pytest fixtures: app wired to an in-memory MongoDB."""

from typing import Callable

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.database import Database

from primekart.config import Settings
from primekart.main import create_app
from primekart.services.token_service import TokenClaims

TEST_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def settings() -> Settings:
    """Test settings; bcrypt at its minimum cost to keep tests fast."""
    return Settings(
        MONGODB_URI="mongodb://localhost:27017",
        MONGODB_DB_NAME="primekart_test",
        SECRET_KEY=TEST_SECRET,
        BCRYPT_ROUNDS=4,
        _env_file=None,
    )


@pytest.fixture
def db() -> Database:
    return mongomock.MongoClient()["primekart_test"]


@pytest.fixture
def app(settings, db):
    return create_app(settings=settings, db=db)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client) -> Callable[..., dict]:
    """Register through the API and return the response body."""

    def _register(name: str, email: str, password: str) -> dict:
        response = client.post(
            "/api/users/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def user_token(register_user) -> str:
    return register_user("Alice", "alice@x.com", "pw123")["token"]


@pytest.fixture
def admin_token(client, db, register_user) -> str:
    """Register an account, promote it in the store, and log in again."""
    register_user("Admin", "admin@x.com", "adminpw")
    db.users.update_one({"email": "admin@x.com"}, {"$set": {"role": "admin"}})
    response = client.post(
        "/api/users/login", json={"email": "admin@x.com", "password": "adminpw"}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers() -> Callable[[str], dict]:
    return bearer


@pytest.fixture
def make_principal() -> Callable[..., TokenClaims]:
    def _make(email: str = "alice@x.com", role: str = "user", user_id: str = None) -> TokenClaims:
        return TokenClaims(id=user_id or str(ObjectId()), email=email, role=role)

    return _make
