"""
Pytest configuration for aegis_identity domain tests.

This conftest provides fixtures specific to the identity domain
(users, roles, permissions).
"""

import pytest

from aegis_identity import Role, User
from tests.shared.fixtures.factories import make_role, make_user


@pytest.fixture
def admin_role() -> Role:
    return make_role("admin", ["users:read", "users:update", "roles:read"])


@pytest.fixture
def member_role() -> Role:
    return make_role("user", ["profile:read"])


@pytest.fixture
def test_user(member_role) -> User:
    return make_user("test@example.com", roles=[member_role])
