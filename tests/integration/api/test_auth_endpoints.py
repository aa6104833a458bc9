"""Tests for the authentication endpoints."""

from warden_api.dependencies import get_revocation_tracker
from warden_auth import DependencyUnavailableError
from warden_auth.revocation import RevocationTracker


class TestSignUp:
    def test_sign_up_returns_created(
        self,
        test_client,
        registered_user_data,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/signup",
            json=registered_user_data,
        )

        assert response.status_code == 201
        assert response.json() == {"status": "ok"}

    def test_duplicate_username_is_conflict(
        self,
        test_client,
        registered_user_data,
        api_v1_prefix,
    ):
        test_client.post(f"{api_v1_prefix}/auth/signup", json=registered_user_data)

        response = test_client.post(
            f"{api_v1_prefix}/auth/signup",
            json={**registered_user_data, "email": "other@x.test"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    def test_missing_field_is_validation_error(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/signup",
            json={"username": "alice"},
        )

        assert response.status_code == 422

    def test_overlong_password_is_bad_request(
        self,
        test_client,
        registered_user_data,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/signup",
            json={**registered_user_data, "password": "x" * 100},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"


class TestLogin:
    def test_login_returns_token_pair(self, token_pair):
        assert token_pair["accessToken"]
        assert token_pair["refreshToken"]
        assert token_pair["tokenType"] == "bearer"
        assert token_pair["expiresIn"] == 15 * 60

    def test_unknown_user_and_wrong_password_look_the_same(
        self,
        test_client,
        registered_user_data,
        api_v1_prefix,
    ):
        test_client.post(f"{api_v1_prefix}/auth/signup", json=registered_user_data)

        unknown = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"username": "nobody", "password": "pw123"},
        )
        wrong = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"username": "alice", "password": "wrong"},
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()
        assert unknown.json()["code"] == "INVALID_CREDENTIALS"
        assert unknown.headers["WWW-Authenticate"] == "Bearer"


class TestRefreshToken:
    def test_refresh_rotates_and_rejects_replay(
        self,
        test_client,
        token_pair,
        api_v1_prefix,
    ):
        r0 = token_pair["refreshToken"]

        first = test_client.post(
            f"{api_v1_prefix}/auth/refresh-token",
            json={"refreshToken": r0},
        )
        assert first.status_code == 200
        r1 = first.json()["refreshToken"]
        assert r1 != r0

        replay = test_client.post(
            f"{api_v1_prefix}/auth/refresh-token",
            json={"refreshToken": r0},
        )
        assert replay.status_code == 401
        assert replay.json()["code"] == "TOKEN_REVOKED"

        second = test_client.post(
            f"{api_v1_prefix}/auth/refresh-token",
            json={"refreshToken": r1},
        )
        assert second.status_code == 200

    def test_access_token_is_not_a_refresh_token(
        self,
        test_client,
        token_pair,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/refresh-token",
            json={"refreshToken": token_pair["accessToken"]},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_MALFORMED"

    def test_garbage_token(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/refresh-token",
            json={"refresh_token": "garbage"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_MALFORMED"

    def test_cache_outage_is_service_unavailable(
        self,
        test_client,
        token_pair,
        api_v1_prefix,
    ):
        class BrokenTracker(RevocationTracker):
            async def is_consumed(self, token):
                raise DependencyUnavailableError("connection refused")

            async def mark_consumed(self, token, ttl=None):
                raise DependencyUnavailableError("connection refused")

        test_client.app.dependency_overrides[get_revocation_tracker] = BrokenTracker

        response = test_client.post(
            f"{api_v1_prefix}/auth/refresh-token",
            json={"refreshToken": token_pair["refreshToken"]},
        )

        assert response.status_code == 503
        assert response.json() == {
            "detail": "Service temporarily unavailable",
            "code": "DEPENDENCY_UNAVAILABLE",
        }


class TestResetPassword:
    def test_unknown_email_is_not_found(
        self,
        test_client,
        reset_notifier,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/reset-password",
            json={"email": "ghost@x.test"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"
        reset_notifier.publish_password_reset.assert_not_called()

    def test_registered_email_is_published(
        self,
        test_client,
        registered_user_data,
        reset_notifier,
        api_v1_prefix,
    ):
        test_client.post(f"{api_v1_prefix}/auth/signup", json=registered_user_data)

        response = test_client.post(
            f"{api_v1_prefix}/auth/reset-password",
            json={"email": registered_user_data["email"]},
        )

        assert response.status_code == 200
        reset_notifier.publish_password_reset.assert_awaited_once_with(
            registered_user_data["email"],
        )
