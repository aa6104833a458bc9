"""Warden Auth - credential and token infrastructure.

This package provides the authentication building blocks that are
independent of how users are stored:
- Password hashing (bcrypt)
- JWT access/refresh token creation and verification
- Revocation tracking of exchanged refresh tokens (Redis)
- The shared error taxonomy

Architecture:
    warden_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── revocation/         # Consumed refresh token tracking
    ├── schemas.py          # Decoded claim types
    └── exceptions.py       # Error kinds and exceptions

Usage:
    from warden_auth import PasswordHashingService, TokenService
    from warden_auth.revocation import RedisRevocationTracker
"""

from warden_auth.exceptions import (
    ClaimNotFoundError,
    DependencyUnavailableError,
    EmailNotFoundError,
    ErrorKind,
    HashingError,
    InvalidCredentialsError,
    InvalidInputError,
    NoFieldsToUpdateError,
    OperationTimeoutError,
    SigningError,
    TokenExpiredError,
    TokenMalformedError,
    TokenRevokedError,
    UserAlreadyExistsError,
    UserNotFoundError,
    WardenError,
    operation,
)
from warden_auth.revocation import RevocationTracker
from warden_auth.schemas import (
    ClaimValue,
    NumericClaim,
    StringClaim,
    TokenClaims,
    TokenPair,
    TokenType,
)
from warden_auth.services import PasswordHashingService, TokenService

__all__ = [
    # Services
    "PasswordHashingService",
    "TokenService",
    "RevocationTracker",
    # Schemas
    "ClaimValue",
    "NumericClaim",
    "StringClaim",
    "TokenClaims",
    "TokenPair",
    "TokenType",
    # Exceptions
    "ErrorKind",
    "WardenError",
    "operation",
    "ClaimNotFoundError",
    "DependencyUnavailableError",
    "EmailNotFoundError",
    "HashingError",
    "InvalidCredentialsError",
    "InvalidInputError",
    "NoFieldsToUpdateError",
    "OperationTimeoutError",
    "SigningError",
    "TokenExpiredError",
    "TokenMalformedError",
    "TokenRevokedError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
