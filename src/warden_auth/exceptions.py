"""Authentication and identity error taxonomy.

Every error raised by the warden packages is a ``WardenError`` carrying a
stable ``ErrorKind``. The presentation layer picks status codes and
user-facing messages from the kind alone, never from the message text.

Errors are wrapped with the name of each operation they cross (see
``operation``), so ``str(error)`` reads like a call trail while the
original object, and therefore its kind, is preserved.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of error classifications.

    These values are part of the public API contract. Should not be changed.
    """

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_INPUT = "INVALID_INPUT"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_MALFORMED = "TOKEN_MALFORMED"
    TOKEN_REVOKED = "TOKEN_REVOKED"
    CLAIM_NOT_FOUND = "CLAIM_NOT_FOUND"
    NO_FIELDS_TO_UPDATE = "NO_FIELDS_TO_UPDATE"
    DEPENDENCY_UNAVAILABLE = "DEPENDENCY_UNAVAILABLE"
    TIMEOUT = "TIMEOUT"
    INTERNAL = "INTERNAL"


class WardenError(Exception):
    """Base exception for all authentication and identity errors.

    Attributes
    ----------
    message
        Human-readable error message
    kind
        Classification used by callers to decide how to react
    details
        Optional additional context (logged but not exposed to users)
    ops
        Names of the operations the error crossed, outermost first
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "Internal error"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.ops: list[str] = []
        super().__init__(self.message)

    def add_op(self, op: str) -> None:
        self.ops.insert(0, op)

    def __str__(self) -> str:
        return ": ".join([*self.ops, self.message])

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"kind={self.kind.value!r}, "
            f"ops={self.ops!r})"
        )


class UserNotFoundError(WardenError):
    """Raised when a user cannot be found by id or username."""

    kind = ErrorKind.NOT_FOUND
    default_message = "User not found"


class EmailNotFoundError(WardenError):
    """Raised when no user is registered with the given email."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Email not found"


class UserAlreadyExistsError(WardenError):
    """Raised when the username (or email) is already registered."""

    kind = ErrorKind.CONFLICT
    default_message = "User already exists"


class InvalidCredentialsError(WardenError):
    """Raised when the password does not match or the account is blocked."""

    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Invalid username or password"


class InvalidInputError(WardenError):
    """Raised when a request value is empty or out of bounds."""

    kind = ErrorKind.INVALID_INPUT
    default_message = "Invalid input"


class TokenExpiredError(WardenError):
    kind = ErrorKind.TOKEN_EXPIRED
    default_message = "Token has expired"


class TokenMalformedError(WardenError):
    """Raised when a token's signature or structure is invalid."""

    kind = ErrorKind.TOKEN_MALFORMED
    default_message = "Token is malformed"


class TokenRevokedError(WardenError):
    """Raised when a refresh token has already been exchanged."""

    kind = ErrorKind.TOKEN_REVOKED
    default_message = "Token revoked"


class ClaimNotFoundError(WardenError):
    kind = ErrorKind.CLAIM_NOT_FOUND
    default_message = "Claim not found"


class NoFieldsToUpdateError(WardenError):
    """Raised when a patch request would change nothing."""

    kind = ErrorKind.NO_FIELDS_TO_UPDATE
    default_message = "No fields to update"


class DependencyUnavailableError(WardenError):
    """Raised when the store, cache or notification channel fails."""

    kind = ErrorKind.DEPENDENCY_UNAVAILABLE
    default_message = "Dependency unavailable"


class OperationTimeoutError(WardenError):
    kind = ErrorKind.TIMEOUT
    default_message = "Operation timed out"


class HashingError(WardenError):
    """Raised when a password hash cannot be produced or parsed."""

    kind = ErrorKind.INTERNAL
    default_message = "Password hashing failed"


class SigningError(WardenError):
    kind = ErrorKind.INTERNAL
    default_message = "Token signing failed"


@contextmanager
def operation(op: str) -> Iterator[None]:
    """Record ``op`` on any ``WardenError`` leaving the block.

    Examples
    --------
    >>> with operation("auth.login"):
    ...     raise UserNotFoundError
    Traceback (most recent call last):
    ...
    warden_auth.exceptions.UserNotFoundError: auth.login: User not found
    """
    try:
        yield
    except WardenError as e:
        e.add_op(op)
        raise
