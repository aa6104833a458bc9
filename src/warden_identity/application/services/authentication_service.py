"""Authentication service: signup, login, refresh rotation and password reset."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from warden_auth import (
    EmailNotFoundError,
    InvalidCredentialsError,
    InvalidInputError,
    PasswordHashingService,
    TokenClaims,
    TokenMalformedError,
    TokenPair,
    TokenRevokedError,
    TokenService,
    UserAlreadyExistsError,
    UserNotFoundError,
    operation,
)
from warden_identity.application.deadline import run_operation
from warden_identity.domain.user import User

if TYPE_CHECKING:
    from warden_auth.revocation import RevocationTracker
    from warden_identity.domain.user import UserRepository
    from warden_identity.infrastructure.notifications import PasswordResetNotifier

logger = logging.getLogger(__name__)


def _require(**values: str) -> None:
    for name, value in values.items():
        if not value:
            msg = f"{name} cannot be empty"
            raise InvalidInputError(msg)


class AuthenticationService:
    """
    Application service for user authentication.

    Coordinates the user store, the password hasher, the token service,
    the revocation tracker and the password reset channel:
    - User registration
    - Login issuing an access/refresh token pair
    - Refresh token rotation (each refresh token is single use)
    - Password reset dispatch

    The service holds no state between calls. Every public operation runs
    under a deadline and fails as a whole: errors are raised with the
    operation name attached and are never logged or retried here.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        token_service: TokenService,
        revocation_tracker: RevocationTracker,
        reset_notifier: PasswordResetNotifier,
        default_timeout: float | None = None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._token_service = token_service
        self._revocation_tracker = revocation_tracker
        self._reset_notifier = reset_notifier
        self._default_timeout = default_timeout

    def _create_token_pair(self, user: User) -> TokenPair:
        access_token = self._token_service.issue_access_token(
            subject_id=user.id,
            role=user.role.value,
        )
        refresh_token = self._token_service.issue_refresh_token(subject_id=user.id)
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def _deadline(self, timeout: float | None) -> float | None:
        return timeout if timeout is not None else self._default_timeout

    async def sign_up(
        self,
        username: str,
        email: str,
        password: str,
        *,
        timeout: float | None = None,
    ) -> User:
        """Register a new user with a hashed password.

        Raises
        ------
        UserAlreadyExistsError
            If the username (or email) is already registered
        InvalidInputError
            If a field is empty or the password is too long
        """
        return await run_operation(
            "auth.sign_up",
            self._sign_up(username, email, password),
            self._deadline(timeout),
        )

    async def _sign_up(self, username: str, email: str, password: str) -> User:
        _require(username=username, email=email, password=password)

        existing_user = await self._user_repo.find_by_username(username)
        if existing_user is not None:
            msg = f"User already exists: {username}"
            raise UserAlreadyExistsError(msg)

        # bcrypt is CPU bound; keep it off the event loop
        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user = User.create(username=username, email=email, password_hash=password_hash)
        await self._user_repo.create(user)

        logger.info("User registered: %s", user.id)
        return user

    async def login(
        self,
        username: str,
        password: str,
        *,
        timeout: float | None = None,
    ) -> TokenPair:
        """Verify credentials and issue a new token pair.

        Raises
        ------
        UserNotFoundError
            If no user has this username
        InvalidCredentialsError
            If the password does not match or the account is blocked
        """
        return await run_operation(
            "auth.login",
            self._login(username, password),
            self._deadline(timeout),
        )

    async def _login(self, username: str, password: str) -> TokenPair:
        _require(username=username, password=password)

        user = await self._user_repo.find_by_username(username)
        if user is None:
            raise UserNotFoundError

        verified = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not verified:
            raise InvalidCredentialsError
        if user.is_blocked:
            msg = "Account is blocked"
            raise InvalidCredentialsError(msg)

        logger.info("User logged in: %s", user.id)
        return self._create_token_pair(user)

    async def refresh_token(
        self,
        refresh_token: str,
        *,
        timeout: float | None = None,
    ) -> TokenPair:
        """Exchange a refresh token for a new pair, consuming the old one.

        The presented token is verified, checked against and then added to
        the revocation set before any new token is issued. Marking is an
        atomic insert-if-absent: if a concurrent call consumed the same
        token first, this call fails with ``TokenRevokedError``.

        Raises
        ------
        TokenExpiredError
            If the refresh token has expired
        TokenMalformedError
            If it is forged, corrupted or not a refresh token
        TokenRevokedError
            If it has already been exchanged
        UserNotFoundError
            If its subject no longer exists
        """
        return await run_operation(
            "auth.refresh_token",
            self._refresh_token(refresh_token),
            self._deadline(timeout),
        )

    async def _refresh_token(self, refresh_token: str) -> TokenPair:
        claims = self._token_service.parse_and_verify(refresh_token)
        if not claims.is_refresh_token():
            msg = "Not a refresh token"
            raise TokenMalformedError(msg)

        if await self._revocation_tracker.is_consumed(refresh_token):
            raise TokenRevokedError

        ttl = self._token_service.remaining_lifetime(claims)
        if not await self._revocation_tracker.mark_consumed(refresh_token, ttl):
            msg = "Token revoked by a concurrent refresh"
            raise TokenRevokedError(msg)

        # The subject comes from the old token; the new pair does not exist yet
        try:
            user_id = UUID(claims.extract("sub"))
        except ValueError as e:
            msg = "Subject claim is not a valid user id"
            raise TokenMalformedError(msg) from e

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError
        if user.is_blocked:
            msg = "Account is blocked"
            raise InvalidCredentialsError(msg)

        logger.debug("Tokens rotated for user: %s", user.id)
        return self._create_token_pair(user)

    async def reset_password(
        self,
        email: str,
        *,
        timeout: float | None = None,
    ) -> None:
        """Publish a password reset request for a registered email.

        Raises
        ------
        EmailNotFoundError
            If no user is registered with this email; nothing is published
        """
        await run_operation(
            "auth.reset_password",
            self._reset_password(email),
            self._deadline(timeout),
        )

    async def _reset_password(self, email: str) -> None:
        _require(email=email)

        if not await self._user_repo.exists_by_email(email):
            raise EmailNotFoundError

        await self._reset_notifier.publish_password_reset(email)

    def authenticate(self, access_token: str) -> TokenClaims:
        """Verify an access token for request authorization.

        Access tokens are short-lived and are not checked against the
        revocation set.
        """
        with operation("auth.authenticate"):
            claims = self._token_service.parse_and_verify(access_token)
            if claims.is_refresh_token():
                msg = "Not an access token"
                raise TokenMalformedError(msg)
        return claims
