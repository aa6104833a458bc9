"""JWT token service.

Creates and verifies the signed, time-bound access and refresh tokens.
Tokens are stateless: expiry is enforced here, and single use of refresh
tokens is enforced out-of-band by the revocation tracker.
"""

from __future__ import annotations

import math
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

import jwt

from warden_auth.exceptions import (
    SigningError,
    TokenExpiredError,
    TokenMalformedError,
)
from warden_auth.schemas import TokenClaims, TokenType
from warden_auth.time import ensure_tz_aware, utc_now


class TokenService:
    """Service for JWT token creation and verification.

    Access tokens carry ``sub``, ``role`` and ``exp``; refresh tokens carry
    ``sub`` and ``exp`` only. Both also carry ``type``, ``iat`` and a random
    ``jti`` so that two tokens issued in the same second never collide.

    Examples
    --------
    >>> service = TokenService(secret_key="a-secret-of-at-least-32-bytes!!!")
    >>> token = service.issue_access_token(user_id, "user")
    >>> claims = service.parse_and_verify(token)
    >>> claims.subject == str(user_id)
    True
    """

    DEFAULT_ACCESS_TTL = timedelta(minutes=15)
    DEFAULT_REFRESH_TTL = timedelta(days=30)
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_ttl: timedelta = DEFAULT_ACCESS_TTL,
        refresh_token_ttl: timedelta = DEFAULT_REFRESH_TTL,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the token service.

        Parameters
        ----------
        secret_key
            Shared HMAC secret for signing and verifying. Must be kept secure.
        access_token_ttl
            Lifetime of access tokens
        refresh_token_ttl
            Lifetime of refresh tokens, must be longer than access tokens
        clock
            Source of the current time when callers do not pass ``now``
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if access_token_ttl >= refresh_token_ttl:
            msg = "Access token TTL must be shorter than refresh token TTL"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_ttl = access_token_ttl
        self._refresh_ttl = refresh_token_ttl
        self._clock = clock

    @property
    def access_token_ttl(self) -> timedelta:
        return self._access_ttl

    @property
    def refresh_token_ttl(self) -> timedelta:
        return self._refresh_ttl

    def issue_access_token(
        self,
        subject_id: UUID | str,
        role: str,
        now: datetime | None = None,
    ) -> str:
        """Create a short-lived access token.

        Raises
        ------
        SigningError
            If the token cannot be signed
        """
        return self._issue(
            subject_id=subject_id,
            token_type=TokenType.ACCESS,
            ttl=self._access_ttl,
            now=now,
            extra={"role": role},
        )

    def issue_refresh_token(
        self,
        subject_id: UUID | str,
        now: datetime | None = None,
    ) -> str:
        """Create a long-lived refresh token.

        Refresh tokens carry no role; the role is re-read from the store
        every time the token is exchanged.
        """
        return self._issue(
            subject_id=subject_id,
            token_type=TokenType.REFRESH,
            ttl=self._refresh_ttl,
            now=now,
        )

    def parse_and_verify(
        self,
        token: str,
        now: datetime | None = None,
    ) -> TokenClaims:
        """Verify signature and expiry and decode the claims.

        Parameters
        ----------
        token
            The encoded JWT
        now
            Verification time (defaults to the service clock)

        Returns
        -------
        TokenClaims of the verified token

        Raises
        ------
        TokenMalformedError
            If the signature, structure or claim types are invalid
        TokenExpiredError
            If the signature is valid but ``exp`` has passed
        """
        if not token:
            msg = "Token is empty"
            raise TokenMalformedError(msg)

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                # Expiry is checked below against the injectable clock
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": ["sub", "exp"],
                },
            )
        except jwt.InvalidTokenError as e:
            raise TokenMalformedError(f"Invalid token: {e}") from e

        claims = TokenClaims.from_payload(payload)
        if self._current(now) >= claims.expires_at:
            raise TokenExpiredError
        return claims

    def remaining_lifetime(
        self,
        claims: TokenClaims,
        now: datetime | None = None,
    ) -> timedelta:
        """Time left until the token expires (never negative)."""
        remaining = claims.expires_at - self._current(now)
        return max(remaining, timedelta(0))

    def _issue(
        self,
        subject_id: UUID | str,
        token_type: TokenType,
        ttl: timedelta,
        now: datetime | None,
        extra: dict[str, Any] | None = None,
    ) -> str:
        issued_at = math.floor(self._current(now).timestamp())

        payload: dict[str, Any] = {
            "sub": str(subject_id),
            "type": token_type.value,
            "iat": issued_at,
            "exp": issued_at + int(ttl.total_seconds()),
            "jti": uuid.uuid4().hex,
        }
        if extra:
            payload.update(extra)

        try:
            return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise SigningError(f"Failed to sign {token_type.value} token: {e}") from e

    def _current(self, now: datetime | None) -> datetime:
        return ensure_tz_aware(now) if now is not None else self._clock()
