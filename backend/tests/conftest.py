"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock, patch
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

LANDOWNER_ID = "landowner-1"
GARDENER_ID = "gardener-1"
OTHER_GARDENER_ID = "gardener-2"
STRANGER_ID = "stranger-1"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    name: str = "Test User",
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        name: Display name placed in user_metadata

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
        "user_metadata": {"name": name},
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def bearer(user_id: str) -> dict[str, str]:
    """Authorization headers for a given user."""
    return {"Authorization": f"Bearer {create_test_token(user_id=user_id)}"}


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and client cache around each test."""
    reset_container()
    reset_client_cache()
    yield
    reset_container()
    reset_client_cache()


@pytest.fixture
def jwt_auth():
    """
    Let the real AuthService validate tokens signed with TEST_JWT_SECRET.

    Route tests override the feature services but keep token validation
    real, so 401s come from the actual middleware.
    """
    with patch("modules.auth.service.get_settings") as mock_settings, \
            patch("modules.auth.service.get_supabase_client") as mock_db:
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()
        yield mock_db.return_value


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
