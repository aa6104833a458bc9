"""
Pytest configuration for warden_identity integration tests.

Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    db_engine,
    db_session,
    pg_session,
    postgres_container,
)

__all__ = [
    "db_engine",
    "db_session",
    "pg_session",
    "postgres_container",
]
