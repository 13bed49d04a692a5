"""API tests for user administration and guard enforcement."""

from uuid import uuid4

import pytest


@pytest.fixture
def role_ids(test_client, api_v1_prefix, admin_headers) -> dict[str, str]:
    response = test_client.get(f"{api_v1_prefix}/roles", headers=admin_headers)
    return {r["name"]: r["id"] for r in response.json()["items"]}


@pytest.fixture
def reader_headers(test_client, api_v1_prefix, admin_headers, login_as) -> dict:
    """A user whose only permission is users:read."""
    permissions = test_client.get(
        f"{api_v1_prefix}/permissions", headers=admin_headers
    ).json()
    users_read = next(p["id"] for p in permissions if p["name"] == "users:read")
    role = test_client.post(
        f"{api_v1_prefix}/roles",
        headers=admin_headers,
        json={"name": "reader", "permission_ids": [users_read]},
    ).json()
    test_client.post(
        f"{api_v1_prefix}/users",
        headers=admin_headers,
        json={
            "email": "reader@example.com",
            "password": "reader-password",
            "first_name": "Rea",
            "last_name": "Der",
            "role_ids": [role["id"]],
        },
    )
    return login_as("reader@example.com", "reader-password")


def _create_user(client, prefix, headers, email="new@example.com", role_ids=()):
    response = client.post(
        f"{prefix}/users",
        headers=headers,
        json={
            "email": email,
            "password": "new-user-password",
            "first_name": "New",
            "last_name": "User",
            "role_ids": list(role_ids),
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestUserAdministration:
    def test_admin_creates_user_with_roles(
        self, test_client, api_v1_prefix, admin_headers, role_ids
    ):
        user = _create_user(
            test_client, api_v1_prefix, admin_headers, role_ids=[role_ids["moderator"]]
        )

        assert [r["name"] for r in user["roles"]] == ["moderator"]

    def test_create_user_unknown_role(self, test_client, api_v1_prefix, admin_headers):
        response = test_client.post(
            f"{api_v1_prefix}/users",
            headers=admin_headers,
            json={
                "email": "new@example.com",
                "password": "new-user-password",
                "first_name": "New",
                "last_name": "User",
                "role_ids": [str(uuid4())],
            },
        )

        assert response.status_code == 404
        assert response.json()["code"] == "ROLE_NOT_FOUND"

    def test_list_users_paginated_and_searchable(
        self, test_client, api_v1_prefix, admin_headers
    ):
        _create_user(test_client, api_v1_prefix, admin_headers, "alice@example.com")
        _create_user(test_client, api_v1_prefix, admin_headers, "bob@example.com")

        page = test_client.get(
            f"{api_v1_prefix}/users",
            headers=admin_headers,
            params={"limit": 2, "page": 1},
        ).json()
        assert page["total"] == 3
        assert page["total_pages"] == 2
        assert len(page["items"]) == 2

        searched = test_client.get(
            f"{api_v1_prefix}/users",
            headers=admin_headers,
            params={"search": "ALICE"},
        ).json()
        assert [u["email"] for u in searched["items"]] == ["alice@example.com"]

    def test_limit_above_maximum_rejected(self, test_client, api_v1_prefix, admin_headers):
        response = test_client.get(
            f"{api_v1_prefix}/users",
            headers=admin_headers,
            params={"limit": 1000},
        )

        assert response.status_code == 422

    def test_get_unknown_user(self, test_client, api_v1_prefix, admin_headers):
        response = test_client.get(
            f"{api_v1_prefix}/users/{uuid4()}", headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_update_user(self, test_client, api_v1_prefix, admin_headers):
        user = _create_user(test_client, api_v1_prefix, admin_headers)

        response = test_client.put(
            f"{api_v1_prefix}/users/{user['id']}",
            headers=admin_headers,
            json={"first_name": "Renamed"},
        )

        assert response.status_code == 200
        assert response.json()["first_name"] == "Renamed"
        assert response.json()["last_name"] == "User"

    def test_update_user_email_conflict(self, test_client, api_v1_prefix, admin_headers):
        user = _create_user(test_client, api_v1_prefix, admin_headers)

        response = test_client.put(
            f"{api_v1_prefix}/users/{user['id']}",
            headers=admin_headers,
            json={"email": "admin@example.com"},
        )

        assert response.status_code == 409

    def test_delete_user(self, test_client, api_v1_prefix, admin_headers):
        user = _create_user(test_client, api_v1_prefix, admin_headers)

        response = test_client.delete(
            f"{api_v1_prefix}/users/{user['id']}", headers=admin_headers
        )
        assert response.status_code == 204

        again = test_client.delete(
            f"{api_v1_prefix}/users/{user['id']}", headers=admin_headers
        )
        assert again.status_code == 404

    def test_assign_and_remove_role(
        self, test_client, api_v1_prefix, admin_headers, role_ids
    ):
        user = _create_user(test_client, api_v1_prefix, admin_headers)
        url = f"{api_v1_prefix}/users/{user['id']}/roles"

        assigned = test_client.post(
            url, headers=admin_headers, json={"role_id": role_ids["user"]}
        )
        assert assigned.status_code == 200
        assert [r["name"] for r in assigned.json()["roles"]] == ["user"]

        duplicate = test_client.post(
            url, headers=admin_headers, json={"role_id": role_ids["user"]}
        )
        assert duplicate.status_code == 409
        assert duplicate.json()["code"] == "ROLE_ALREADY_ASSIGNED"

        removed = test_client.delete(f"{url}/{role_ids['user']}", headers=admin_headers)
        assert removed.status_code == 200
        assert removed.json()["roles"] == []

        not_assigned = test_client.delete(
            f"{url}/{role_ids['user']}", headers=admin_headers
        )
        assert not_assigned.status_code == 422
        assert not_assigned.json()["code"] == "ROLE_NOT_ASSIGNED"

    def test_effective_permissions(
        self, test_client, api_v1_prefix, admin_headers, role_ids
    ):
        user = _create_user(
            test_client, api_v1_prefix, admin_headers, role_ids=[role_ids["user"]]
        )

        response = test_client.get(
            f"{api_v1_prefix}/users/{user['id']}/permissions", headers=admin_headers
        )

        assert response.json() == {"user_id": user["id"], "permissions": ["profile:read"]}

    def test_verify_email(self, test_client, api_v1_prefix, admin_headers):
        user = _create_user(test_client, api_v1_prefix, admin_headers)

        response = test_client.put(
            f"{api_v1_prefix}/users/{user['id']}/verify-email", headers=admin_headers
        )

        assert response.json()["is_email_verified"] is True

    def test_own_profile(self, test_client, api_v1_prefix, user_headers):
        response = test_client.get(f"{api_v1_prefix}/users/me", headers=user_headers)

        assert response.status_code == 200
        assert response.json()["email"] == "api-test-user@example.com"


class TestGuards:
    def test_user_without_permissions_is_forbidden(
        self, test_client, api_v1_prefix, user_headers
    ):
        response = test_client.get(f"{api_v1_prefix}/users", headers=user_headers)

        assert response.status_code == 403
        assert response.json() == {
            "detail": "Insufficient permissions",
            "code": "FORBIDDEN",
        }

    def test_permission_guard_admits_reader(
        self, test_client, api_v1_prefix, reader_headers
    ):
        response = test_client.get(f"{api_v1_prefix}/users", headers=reader_headers)

        assert response.status_code == 200

    def test_reader_cannot_use_admin_or_update_routes(
        self, test_client, api_v1_prefix, reader_headers
    ):
        users = test_client.get(f"{api_v1_prefix}/users", headers=reader_headers).json()
        target = users["items"][0]["id"]

        create = test_client.post(
            f"{api_v1_prefix}/users",
            headers=reader_headers,
            json={
                "email": "x@example.com",
                "password": "xxxxxxxx",
                "first_name": "X",
                "last_name": "Y",
            },
        )
        update = test_client.put(
            f"{api_v1_prefix}/users/{target}",
            headers=reader_headers,
            json={"first_name": "Nope"},
        )
        roles = test_client.get(f"{api_v1_prefix}/roles", headers=reader_headers)

        assert create.status_code == 403
        assert update.status_code == 403
        assert roles.status_code == 403

    def test_role_changes_apply_from_next_login(
        self,
        test_client,
        api_v1_prefix,
        admin_headers,
        user_headers,
        registered_user_data,
        role_ids,
        login_as,
    ):
        me = test_client.get(f"{api_v1_prefix}/users/me", headers=user_headers).json()
        test_client.post(
            f"{api_v1_prefix}/users/{me['id']}/roles",
            headers=admin_headers,
            json={"role_id": role_ids["moderator"]},
        )

        stale = test_client.get(f"{api_v1_prefix}/users", headers=user_headers)
        assert stale.status_code == 403

        fresh_headers = login_as(
            registered_user_data["email"], registered_user_data["password"]
        )
        fresh = test_client.get(f"{api_v1_prefix}/users", headers=fresh_headers)
        assert fresh.status_code == 200

    def test_deactivation_revokes_existing_tokens(
        self,
        test_client,
        api_v1_prefix,
        admin_headers,
        user_headers,
        registered_user_data,
    ):
        me = test_client.get(f"{api_v1_prefix}/users/me", headers=user_headers).json()

        response = test_client.put(
            f"{api_v1_prefix}/users/{me['id']}/deactivate", headers=admin_headers
        )
        assert response.json()["is_active"] is False

        rejected = test_client.get(f"{api_v1_prefix}/auth/me", headers=user_headers)
        assert rejected.status_code == 401

        login = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )
        assert login.status_code == 403
        assert login.json()["code"] == "ACCOUNT_DEACTIVATED"

        test_client.put(
            f"{api_v1_prefix}/users/{me['id']}/activate", headers=admin_headers
        )
        restored = test_client.get(f"{api_v1_prefix}/auth/me", headers=user_headers)
        assert restored.status_code == 200
