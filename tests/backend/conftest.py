"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with the security primitives,
services and GraphQL helpers used by backend tests.
"""

import sys
from datetime import timedelta
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Security Fixtures
# =============================================================================

@pytest.fixture
def hasher(test_settings):
    from quill.core.security import PasswordHasher

    return PasswordHasher.from_settings(test_settings)


@pytest.fixture
def frozen_issuer(test_settings, frozen_now):
    """TokenIssuer whose clock is stuck at `frozen_now`."""
    from quill.core.security import TokenIssuer

    return TokenIssuer.from_settings(test_settings, clock=lambda: frozen_now)


@pytest.fixture
def verifier_at(test_settings, frozen_now):
    """
    Factory for TokenVerifiers whose clock is `frozen_now + offset`.

    Usage:
        verifier = verifier_at(seconds=3599)
    """
    from quill.core.security import TokenVerifier

    def _make(**offset) -> TokenVerifier:
        now = frozen_now + timedelta(**offset)
        return TokenVerifier.from_settings(test_settings, clock=lambda: now)

    return _make


@pytest.fixture
def expired_token(test_settings, frozen_now):
    """A correctly signed token that expired long ago."""
    from quill.core.security import TokenIssuer

    def _make(subject: str) -> str:
        issuer = TokenIssuer.from_settings(test_settings, clock=lambda: frozen_now)
        return issuer.issue(subject)

    return _make


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def services(test_settings, mock_content_db):
    """The full service container over the mock database."""
    from quill.container import build_services

    return build_services(test_settings, mock_content_db)


@pytest.fixture
def spy_store():
    """
    A DocumentStore stand-in whose methods are AsyncMocks.

    Lets tests assert that no persistence call happened.
    """
    store = MagicMock()
    store.insert = AsyncMock()
    store.get = AsyncMock()
    store.find = AsyncMock(return_value=[])
    store.list_all = AsyncMock(return_value=[])
    store.update_fields = AsyncMock()
    store.remove = AsyncMock()
    return store


@pytest_asyncio.fixture
async def registered_author(services, test_author_data):
    """Register the default test author and return (author, token)."""
    from quill.schemas.auth import LoginRequest, RegisterRequest

    author = await services.credentials.register(RegisterRequest(**test_author_data))
    token = await services.credentials.login(
        LoginRequest(
            username=test_author_data["username"],
            password=test_author_data["password"],
        )
    )
    return author, token


# =============================================================================
# GraphQL Helpers
# =============================================================================

@pytest.fixture
def run_graphql(services):
    """
    Execute a document against the service schema with a given token.

    Usage:
        result = await run_graphql("{ authors { id } }", token=token)
    """
    from graphql import graphql

    from quill.services.gate import RequestContext

    async def _run(query: str, variables: dict = None, token: str = None):
        return await graphql(
            services.schema,
            query,
            variable_values=variables,
            context_value=RequestContext(token=token),
        )

    return _run


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
