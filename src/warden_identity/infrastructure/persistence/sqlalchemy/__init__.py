"""SQLAlchemy implementation for warden_identity persistence.

Examples
--------
# In your Alembic env.py or migration setup:
from warden_identity.infrastructure.persistence.sqlalchemy import IdentityBase
target_metadata = IdentityBase.metadata
"""

from warden_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from warden_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from warden_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
