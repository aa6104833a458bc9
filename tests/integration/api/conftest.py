"""Pytest fixtures for API tests.

The app runs against in-memory SQLite, the in-memory revocation tracker
and a mocked reset channel, so no external services are needed.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tests.shared.fixtures.database import db_engine
from tests.shared.fixtures.factories import (
    TEST_BCRYPT_ROUNDS,
    TEST_EMAIL,
    TEST_PASSWORD,
    TEST_SECRET,
    TEST_USERNAME,
)
from warden_api.app import API_V1_PREFIX, create_app
from warden_api.dependencies import (
    get_db_session,
    get_reset_notifier,
    get_revocation_tracker,
)
from warden_auth.revocation import InMemoryRevocationTracker
from warden_config.settings import Settings
from warden_identity.infrastructure.notifications import PasswordResetNotifier

__all__ = ["db_engine"]


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_SECRET),
        postgres_password=SecretStr("test-password"),
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        api_host="127.0.0.1",
        api_port=8000,
    )


@pytest.fixture
def revocation_tracker() -> InMemoryRevocationTracker:
    return InMemoryRevocationTracker()


@pytest.fixture
def reset_notifier() -> AsyncMock:
    return AsyncMock(spec=PasswordResetNotifier)


@pytest.fixture
def test_client(
    api_settings,
    db_engine,
    revocation_tracker,
    reset_notifier,
) -> TestClient:
    """Create a test client with an in-memory database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_revocation_tracker] = lambda: revocation_tracker
    app.dependency_overrides[get_reset_notifier] = lambda: reset_notifier

    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "username": TEST_USERNAME,
        "email": TEST_EMAIL,
        "password": TEST_PASSWORD,
    }


@pytest.fixture
def token_pair(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Register and log in; returns the token pair response body."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/signup",
        json=registered_user_data,
    )
    assert response.status_code == 201

    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={
            "username": registered_user_data["username"],
            "password": registered_user_data["password"],
        },
    )
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def auth_headers(token_pair) -> dict:
    """Get auth headers for a registered user."""
    return {"Authorization": f"Bearer {token_pair['accessToken']}"}
