"""
Pytest Configuration and Fixtures for Authentication System Tests

This module contains shared fixtures, test doubles, and configuration for
testing the authentication system.
"""

import pytest
import copy
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app
os.environ["SECRET_KEY"] = "test_secret_key_for_testing_purposes_only_12345"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "60"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEVELOPMENT_ENV"] = "local"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("LOG_SERVICE_URL", None)


class FakeUserCollection:
    """
    In-memory stand-in for the Motor user collection.

    Supports the handful of calls UserStore makes and enforces the unique
    email index the way MongoDB does, by raising DuplicateKeyError.
    """

    def __init__(self):
        self.documents = []
        self.indexes = {}

    async def create_index(self, key, unique=False, name=None):
        index_name = name or f"{key}_1"
        self.indexes[index_name] = {"key": key, "unique": unique}
        return index_name

    def _unique_keys(self):
        return [index["key"] for index in self.indexes.values() if index["unique"]]

    @staticmethod
    def _matches(document, query):
        return all(document.get(field) == value for field, value in query.items())

    async def insert_one(self, document):
        for key in self._unique_keys():
            if any(existing.get(key) == document.get(key) for existing in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error collection: auth.users index: {key}_unique")
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def find_one(self, query):
        for document in self.documents:
            if self._matches(document, query):
                return copy.deepcopy(document)
        return None

    async def delete_one(self, query):
        for index, document in enumerate(self.documents):
            if self._matches(document, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    """Mirrors the MongoDatabase surface the app lifespan relies on."""

    def __init__(self):
        self.users = FakeUserCollection()
        self.connected = False

    async def connect(self):
        self.connected = True

    def close(self):
        self.connected = False


@pytest.fixture
def test_settings():
    from user_auth.config.settings import Settings
    return Settings(
        SECRET_KEY=os.environ["SECRET_KEY"],
        ALGORITHM="HS256",
        ACCESS_TOKEN_EXPIRE_MINUTES=60,
        BCRYPT_ROUNDS=4,
    )


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def user_collection():
    return FakeUserCollection()


@pytest.fixture
def user_store(user_collection):
    from user_auth.service.user_store import UserStore
    return UserStore(user_collection)


@pytest.fixture
def test_app(test_settings, fake_database):
    """Create test application backed by the in-memory database."""
    # Import app after setting environment variables
    from app import create_app
    return create_app(settings=test_settings, database=fake_database)


@pytest.fixture
def test_client(test_app):
    """Create test client; entering the context runs the app lifespan."""
    with TestClient(test_app) as client:
        yield client


@pytest.fixture
def sample_user_data():
    """Sample registration data for testing."""
    return {
        "name": "John Doe",
        "email": "John.Doe@Example.com",
        "password": "SecurePass123"
    }


@pytest.fixture
def sample_login_data():
    """Sample login data for testing."""
    return {
        "email": "john.doe@example.com",
        "password": "SecurePass123"
    }


@pytest.fixture
def registered_user(test_client, sample_user_data):
    """Register the sample user and return the response payload."""
    response = test_client.post("/api/auth/register", json=sample_user_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user):
    return {"Authorization": f"Bearer {registered_user['token']}"}


@pytest.fixture
def expired_token(test_settings):
    """Generate an expired token for testing."""
    from jose import jwt

    expire = datetime.now(timezone.utc) - timedelta(hours=1)
    data = {"sub": str(ObjectId()), "exp": expire}
    return jwt.encode(data, test_settings.SECRET_KEY, algorithm=test_settings.ALGORITHM)


# Helper functions for tests
def generate_test_user(
    email="test@example.com",
    name="Test User",
    password="TestPass123"
):
    """Generate test user data with customizable fields."""
    return {
        "name": name,
        "email": email,
        "password": password
    }


def generate_random_email():
    """Generate a random email for testing."""
    import uuid
    return f"test_{uuid.uuid4().hex[:8]}@example.com"


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "stress: mark test as stress test")
