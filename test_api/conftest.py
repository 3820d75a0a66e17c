"""
Pytest Configuration and Fixtures for Authentication Service Tests

This module contains shared fixtures, mocks, and configuration for testing
the signup/signin service.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app
os.environ["SECRET_KEY"] = "test_secret_key_for_testing_purposes_only_12345"
os.environ["ALGORITHM"] = "HS256"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEVELOPMENT_ENV"] = "local"
os.environ["MONGO_CREATE_INDEXES"] = "false"
os.environ.pop("LOG_SERVICE_URL", None)
os.environ.pop("ACCESS_TOKEN_EXPIRE_MINUTES", None)


@pytest.fixture
def mock_user_collection():
    """Mock MongoDB `user` collection."""
    mock_collection = MagicMock()
    mock_collection.find_one = AsyncMock(return_value=None)
    mock_collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id="test_id"))
    mock_collection.create_index = AsyncMock(return_value="email_unique")
    return mock_collection


@pytest.fixture
def mock_users():
    """Mock user store."""
    mock_store = MagicMock()
    mock_store.find_by_email = AsyncMock(return_value=None)
    mock_store.create = AsyncMock(return_value={"email": "test@example.com", "_id": "123"})
    return mock_store


@pytest.fixture
def mock_hasher():
    """Mock password hasher."""
    mock = MagicMock()
    mock.hash = AsyncMock(return_value="hashedPassword")
    mock.verify = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def mock_tokens():
    """Mock token issuer."""
    mock = MagicMock()
    mock.sign = MagicMock(return_value="token")
    return mock


@pytest.fixture
def auth_manager(mock_users, mock_hasher, mock_tokens):
    from notes_auth.src.auth_manager import AuthManager
    return AuthManager(mock_users, mock_hasher, mock_tokens)


@pytest.fixture
def sample_credentials():
    """Sample signup/signin body."""
    return {
        "email": "test@example.com",
        "password": "password123"
    }


@pytest.fixture
def test_app():
    """Create test application."""
    # Import app after setting environment variables
    from app import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app, auth_manager):
    """Test client whose routes use the mocked collaborators."""
    from notes_auth.routes.user_auth import get_auth_manager
    test_app.dependency_overrides[get_auth_manager] = lambda: auth_manager
    return TestClient(test_app)


class FakeUserCollection:
    """In-memory stand-in for the `user` collection with a unique email index."""

    def __init__(self):
        self.documents = []

    async def find_one(self, query):
        for document in self.documents:
            if all(document.get(key) == value for key, value in query.items()):
                return dict(document)
        return None

    async def insert_one(self, document):
        from bson import ObjectId
        from pymongo.errors import DuplicateKeyError

        if any(existing["email"] == document["email"] for existing in self.documents):
            raise DuplicateKeyError("E11000 duplicate key error collection: notes.user index: email_unique")
        document["_id"] = ObjectId()
        self.documents.append(dict(document))
        return MagicMock(inserted_id=document["_id"])

    async def create_index(self, keys, **kwargs):
        return kwargs.get("name")


@pytest.fixture
def fake_user_collection():
    return FakeUserCollection()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
