"""Data classes for decoded token claims.

A JWT payload may hold claim values as JSON strings or JSON numbers.
They are decoded once, at the codec boundary, into ``StringClaim`` or
``NumericClaim`` so callers never branch on runtime types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Union

from warden_auth.exceptions import ClaimNotFoundError, TokenMalformedError


class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


@dataclass(frozen=True)
class StringClaim:
    value: str

    def as_string(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumericClaim:
    value: int | float

    def as_string(self) -> str:
        """Canonical string form: integral values print without a fraction."""
        if isinstance(self.value, int):
            return str(self.value)
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)

    def as_int(self) -> int:
        return int(self.value)


ClaimValue = Union[StringClaim, NumericClaim]


def decode_claim(name: str, raw: Any) -> ClaimValue:
    """Decode one raw JSON claim value into a ``ClaimValue``."""
    # bool is an int subclass but never a valid claim here
    if isinstance(raw, bool):
        msg = f"Unsupported value type for claim '{name}'"
        raise TokenMalformedError(msg)
    if isinstance(raw, str):
        return StringClaim(raw)
    if isinstance(raw, (int, float)):
        return NumericClaim(raw)
    msg = f"Unsupported value type for claim '{name}'"
    raise TokenMalformedError(msg)


@dataclass(frozen=True)
class TokenClaims:
    """Verified claim set of an access or refresh token."""

    values: Mapping[str, ClaimValue] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> TokenClaims:
        return cls({name: decode_claim(name, raw) for name, raw in payload.items()})

    def get(self, name: str) -> ClaimValue | None:
        return self.values.get(name)

    def extract(self, name: str) -> str:
        """Return the claim's value as a string.

        Raises
        ------
        ClaimNotFoundError
            If the claim is absent
        """
        claim = self.values.get(name)
        if claim is None:
            msg = f"Claim '{name}' not found"
            raise ClaimNotFoundError(msg)
        return claim.as_string()

    @property
    def subject(self) -> str:
        return self.extract("sub")

    @property
    def role(self) -> str | None:
        claim = self.values.get("role")
        return claim.as_string() if claim is not None else None

    @property
    def token_type(self) -> TokenType:
        claim = self.values.get("type")
        # Tokens without a type claim are treated as access tokens
        if claim is None:
            return TokenType.ACCESS
        try:
            return TokenType(claim.as_string())
        except ValueError as e:
            msg = "Unknown token type"
            raise TokenMalformedError(msg) from e

    @property
    def expires_at(self) -> datetime:
        claim = self.values.get("exp")
        if not isinstance(claim, NumericClaim):
            msg = "Claim 'exp' must be numeric"
            raise TokenMalformedError(msg)
        return datetime.fromtimestamp(claim.as_int(), tz=timezone.utc)

    def is_refresh_token(self) -> bool:
        return self.token_type == TokenType.REFRESH


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
