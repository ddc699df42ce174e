"""
Global test fixtures for Quill.

This module provides shared fixtures for all tests including:
- Test settings with a cheap bcrypt work factor
- Mock MongoDB (mongomock-motor)
- A frozen clock for token expiry tests
- Test author factories
- FastAPI test clients
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings for tests: in-memory database name, fast bcrypt."""
    from quill.config import Settings

    return Settings(
        mongo_uri="mongodb://unused:27017",
        mongo_db_name="quill_test_db",
        jwt_secret_key="test-secret-key",
        jwt_algorithm="HS256",
        jwt_issuer="quill-tests",
        jwt_access_token_expire_minutes=60,
        bcrypt_rounds=4,
        password_min_length=4,
        log_level="WARNING",
        _env_file=None,
    )


# =============================================================================
# Clock Fixtures
# =============================================================================

FROZEN_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now() -> datetime:
    """A fixed, whole-second instant to issue tokens at."""
    return FROZEN_NOW


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    Every test gets its own in-memory server.
    """
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_content_db(mock_async_mongo_client, test_settings):
    """Provide the mock content database with indexes like the real app."""
    from quill.database.registry import create_indexes

    db = mock_async_mongo_client[test_settings.mongo_db_name]
    await create_indexes(db)
    yield db


# =============================================================================
# Author Fixtures
# =============================================================================

@pytest.fixture
def test_author_data() -> dict:
    """Basic author data for registration."""
    return {
        "firstname": "Bob",
        "lastname": "Builder",
        "username": "bob",
        "password": "correct-horse",
    }


@pytest.fixture
def other_author_data() -> dict:
    return {
        "firstname": "Alice",
        "lastname": "Liddell",
        "username": "alice",
        "password": "looking-glass",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, mock_async_mongo_client):
    """
    Create the FastAPI app for testing, backed by the mock MongoDB client.
    """
    from quill.main import create_app

    return create_app(settings=test_settings, mongo_client=mock_async_mongo_client)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Entering the client runs the lifespan, which builds the services.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_authenticated_request():
    """
    Helper to make authenticated requests with token as query param.

    Usage:
        def test_something(client, make_authenticated_request):
            make_authenticated_request(client, "post", "/graphql", token, json={...})
    """
    def _request(client: TestClient, method: str, url: str, token: str, **kwargs):
        separator = "&" if "?" in url else "?"
        authenticated_url = f"{url}{separator}token={token}"

        request_method = getattr(client, method.lower())
        return request_method(authenticated_url, **kwargs)

    return _request
