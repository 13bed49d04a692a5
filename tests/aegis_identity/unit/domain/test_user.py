"""Unit tests for the User aggregate."""

import pytest

from aegis_identity import User
from aegis_identity.domain.shared import ValidationError
from tests.shared.fixtures.factories import FAKE_HASH, make_role, make_user


class TestUserCreation:
    def test_create_defaults(self):
        user = User.create(" New@Example.com ", FAKE_HASH, "Ada", "Lovelace")

        assert user.email == "new@example.com"
        assert user.is_active is True
        assert user.is_email_verified is False
        assert user.roles == ()
        assert user.full_name == "Ada Lovelace"

    def test_empty_password_hash_rejected(self):
        with pytest.raises(ValidationError):
            User.create("new@example.com", "")

    def test_change_password_hash_rejects_empty(self):
        user = make_user()

        with pytest.raises(ValidationError):
            user.change_password_hash("")


class TestUserAuthorization:
    def test_has_role_exact_match(self):
        user = make_user(roles=[make_role("admin")])

        assert user.has_role("admin")
        assert not user.has_role("Admin")
        assert not user.has_role("moderator")

    def test_has_permission_through_any_role(self):
        user = make_user(
            roles=[
                make_role("user", ["profile:read"]),
                make_role("moderator", ["users:read"]),
            ],
        )

        assert user.has_permission("profile:read")
        assert user.has_permission("users:read")
        assert not user.has_permission("users:delete")

    def test_user_without_roles_has_no_permissions(self):
        user = make_user()

        assert user.permission_names == []
        assert not user.has_permission("profile:read")

    def test_permission_names_deduplicated_in_order(self):
        user = make_user(
            roles=[
                make_role("user", ["profile:read", "users:read"]),
                make_role("moderator", ["users:read", "users:update"]),
            ],
        )

        assert user.permission_names == ["profile:read", "users:read", "users:update"]

    def test_assign_and_remove_role(self):
        user = make_user()
        role = make_role("moderator")

        assert user.assign_role(role) is True
        assert user.assign_role(role) is False
        assert user.has_role_id(role.id)

        assert user.remove_role(role.id) is True
        assert user.remove_role(role.id) is False
        assert user.role_names == []


class TestUserLifecycle:
    def test_deactivate_and_activate(self):
        user = make_user()

        user.deactivate()
        assert user.is_active is False

        user.activate()
        assert user.is_active is True

    def test_verify_email(self):
        user = make_user()

        user.verify_email()
        assert user.is_email_verified is True

        user.mark_email_unverified()
        assert user.is_email_verified is False

    def test_update_profile_partial(self):
        user = make_user()

        user.update_profile(last_name="Hopper")

        assert user.first_name == "Test"
        assert user.last_name == "Hopper"

    def test_change_email_normalizes(self):
        user = make_user()

        user.change_email("OTHER@example.com")

        assert user.email == "other@example.com"
