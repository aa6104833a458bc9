"""Tests for the application factory and the exception handlers."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import SecretStr

from tests.shared.fixtures.factories import TEST_BCRYPT_ROUNDS, TEST_SECRET
from warden_api.app import API_V1_PREFIX, create_app
from warden_api.dependencies import (
    get_engine,
    get_redis_client,
    get_reset_notifier,
    get_revocation_tracker,
)
from warden_api.exception_handlers import setup_exception_handlers
from warden_auth import (
    DependencyUnavailableError,
    NoFieldsToUpdateError,
    TokenRevokedError,
)
from warden_auth.revocation import InMemoryRevocationTracker
from warden_config.settings import Settings
from warden_identity.infrastructure.notifications import PasswordResetNotifier


@pytest.fixture
def file_db_settings(tmp_path) -> Settings:
    """Settings pointing at a SQLite file and a Redis host of their own."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_SECRET),
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'warden.db'}",
        redis_host="cache.internal",
        redis_port=6380,
    )


class TestCreateApp:
    def test_dependencies_use_passed_settings(self, file_db_settings):
        app = create_app(settings=file_db_settings)

        assert app.state.settings is file_db_settings

        engine = get_engine(file_db_settings.database_url)
        assert engine.url.database.endswith("warden.db")

        client = get_redis_client(file_db_settings)
        kwargs = client.connection_pool.connection_kwargs
        assert kwargs["host"] == "cache.internal"
        assert kwargs["port"] == 6380

    def test_lifespan_and_requests_use_passed_database(
        self,
        file_db_settings,
        tmp_path,
    ):
        app = create_app(settings=file_db_settings)
        tracker = InMemoryRevocationTracker()
        app.dependency_overrides[get_revocation_tracker] = lambda: tracker
        app.dependency_overrides[get_reset_notifier] = lambda: AsyncMock(
            spec=PasswordResetNotifier
        )

        with TestClient(app) as client:
            response = client.post(
                f"{API_V1_PREFIX}/auth/signup",
                json={"username": "bob", "email": "bob@x.test", "password": "pw"},
            )
            assert response.status_code == 201

            response = client.post(
                f"{API_V1_PREFIX}/auth/login",
                json={"username": "bob", "password": "pw"},
            )
            assert response.status_code == 200

        assert (tmp_path / "warden.db").is_file()

    def test_health(self, file_db_settings):
        client = TestClient(create_app(settings=file_db_settings))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestExceptionHandlers:
    @pytest.fixture
    def client(self) -> TestClient:
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/revoked")
        async def revoked():
            raise TokenRevokedError

        @app.get("/unavailable")
        async def unavailable():
            raise DependencyUnavailableError("redis at 10.0.0.5:6379 refused")

        @app.get("/empty-patch")
        async def empty_patch():
            raise NoFieldsToUpdateError

        return TestClient(app)

    def test_token_error_is_unauthorized_with_challenge(self, client):
        response = client.get("/revoked")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["code"] == "TOKEN_REVOKED"

    def test_dependency_failure_hides_detail(self, client):
        response = client.get("/unavailable")

        assert response.status_code == 503
        assert response.json() == {
            "detail": "Service temporarily unavailable",
            "code": "DEPENDENCY_UNAVAILABLE",
        }

    def test_input_error_keeps_message(self, client):
        response = client.get("/empty-patch")

        assert response.status_code == 400
        assert response.json()["code"] == "NO_FIELDS_TO_UPDATE"
        assert "WWW-Authenticate" not in response.headers
