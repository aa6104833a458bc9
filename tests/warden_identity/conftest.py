"""
Pytest configuration for warden_identity domain tests.

Fixtures specific to users and authentication flows.
"""

import pytest

from tests.shared.fixtures.factories import make_user
from warden_identity.domain.user import User, UserRole


@pytest.fixture
def test_user() -> User:
    """Create a standard test user (alice / pw123)."""
    return make_user()


@pytest.fixture
def admin_user() -> User:
    return make_user(username="root", email="root@x.test", role=UserRole.ADMIN)
