"""Shared pytest fixtures for the auth service tests."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from server.config import Settings
from server.core.auth import AuthService
from server.core.security import PasswordHasher, TokenService
from server.core.users import UserStore
from server.database import get_users_collection, init_db
from server.main import create_app


TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings():
    """Settings with a fixed secret and the cheapest bcrypt cost."""
    return Settings(
        _env_file=None,
        JWT_SECRET_KEY=TEST_SECRET,
        BCRYPT_ROUNDS=4,
        MONGODB_DATABASE="auth_test",
    )


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def users_collection(mongo_client, settings):
    collection = get_users_collection(mongo_client, settings)
    init_db(collection)
    return collection


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def auth_service(users_collection, hasher, tokens):
    return AuthService(store=UserStore(users_collection), hasher=hasher, tokens=tokens)


@pytest.fixture
def client(settings, mongo_client):
    """TestClient over a fully started app backed by mongomock."""
    app = create_app(settings=settings, mongo_client=mongo_client)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client):
    payload = {"name": "Ada", "email": "ada@example.com", "password": "s3cret!"}
    response = client.post("/api/register", json=payload)
    assert response.status_code == 200
    return {**payload, "userId": response.json()["userId"]}
