"""API tests for the permission catalogue."""

from uuid import uuid4


class TestPermissionEndpoints:
    def test_seeded_catalogue(self, test_client, api_v1_prefix, admin_headers):
        response = test_client.get(f"{api_v1_prefix}/permissions", headers=admin_headers)

        assert response.status_code == 200
        names = [p["name"] for p in response.json()]
        assert len(names) == 13
        assert names == sorted(names)

    def test_crud(self, test_client, api_v1_prefix, admin_headers):
        created = test_client.post(
            f"{api_v1_prefix}/permissions",
            headers=admin_headers,
            json={"name": "reports:read", "description": "Read reports"},
        )
        assert created.status_code == 201
        permission_id = created.json()["id"]

        updated = test_client.put(
            f"{api_v1_prefix}/permissions/{permission_id}",
            headers=admin_headers,
            json={"description": "Read all reports"},
        )
        assert updated.json()["description"] == "Read all reports"
        assert updated.json()["name"] == "reports:read"

        deactivated = test_client.put(
            f"{api_v1_prefix}/permissions/{permission_id}/deactivate",
            headers=admin_headers,
        )
        assert deactivated.json()["is_active"] is False

        deleted = test_client.delete(
            f"{api_v1_prefix}/permissions/{permission_id}", headers=admin_headers
        )
        assert deleted.status_code == 204

        missing = test_client.get(
            f"{api_v1_prefix}/permissions/{permission_id}", headers=admin_headers
        )
        assert missing.status_code == 404
        assert missing.json()["code"] == "PERMISSION_NOT_FOUND"

    def test_duplicate_name(self, test_client, api_v1_prefix, admin_headers):
        response = test_client.post(
            f"{api_v1_prefix}/permissions",
            headers=admin_headers,
            json={"name": "users:read"},
        )

        assert response.status_code == 409

    def test_delete_unknown(self, test_client, api_v1_prefix, admin_headers):
        response = test_client.delete(
            f"{api_v1_prefix}/permissions/{uuid4()}", headers=admin_headers
        )

        assert response.status_code == 404

    def test_requires_admin(self, test_client, api_v1_prefix, user_headers):
        response = test_client.get(f"{api_v1_prefix}/permissions", headers=user_headers)

        assert response.status_code == 403
