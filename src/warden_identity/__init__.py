"""Warden Identity - users and the authentication workflow.

This package owns the User aggregate and the application services that
tie the warden_auth building blocks to the durable user store and the
password reset channel.

Architecture:
    warden_identity/
    ├── domain/user/        # User aggregate, role, patch, repository port
    ├── application/        # AuthenticationService, UserProfileService
    └── infrastructure/
        ├── persistence/    # SQLAlchemy user store
        └── notifications/  # Password reset channel (Redis list)
"""

from warden_identity.application.services import (
    AuthenticationService,
    UserProfileService,
)
from warden_identity.domain.user import (
    User,
    UserPatch,
    UserRepository,
    UserRole,
)
from warden_identity.infrastructure.notifications import PasswordResetNotifier

__all__ = [
    "AuthenticationService",
    "PasswordResetNotifier",
    "User",
    "UserPatch",
    "UserProfileService",
    "UserRepository",
    "UserRole",
]
