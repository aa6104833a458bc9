"""
Pytest configuration for cross-domain tests.

Flows here wire the real services together: SQLite store, bcrypt,
PyJWT and the in-memory revocation tracker.
"""

from tests.shared.fixtures.database import db_engine, db_session

__all__ = [
    "db_engine",
    "db_session",
]
