"""Unit tests for RoleManagementService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from aegis_identity import (
    PermissionAlreadyGrantedError,
    PermissionNotFoundError,
    PermissionNotGrantedError,
    RoleAlreadyExistsError,
    RoleManagementService,
    RoleNotFoundError,
)
from tests.shared.fixtures.factories import make_permission, make_role


class TestRoleManagementService:
    def setup_method(self):
        self.role_repo = AsyncMock()
        self.permission_repo = AsyncMock()
        self.service = RoleManagementService(
            role_repository=self.role_repo,
            permission_repository=self.permission_repo,
        )

    @pytest.mark.asyncio
    async def test_create_role_skips_unknown_permission_ids(self):
        known = make_permission("users:read")
        self.role_repo.find_by_name.return_value = None
        self.permission_repo.find_by_id.side_effect = [known, None]

        role = await self.service.create_role(
            "auditor",
            "Reads things",
            permission_ids=[known.id, uuid4()],
        )

        assert role.permission_names == ["users:read"]
        self.role_repo.save.assert_awaited_once_with(role)

    @pytest.mark.asyncio
    async def test_create_role_duplicate_name(self):
        self.role_repo.find_by_name.return_value = make_role("auditor")

        with pytest.raises(RoleAlreadyExistsError):
            await self.service.create_role("auditor")

        self.role_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_role_rename_conflict(self):
        role = make_role("auditor")
        self.role_repo.find_by_id.return_value = role
        self.role_repo.find_by_name.return_value = make_role("admin")

        with pytest.raises(RoleAlreadyExistsError):
            await self.service.update_role(role.id, name="admin")

    @pytest.mark.asyncio
    async def test_update_role_fields(self):
        role = make_role("auditor")
        self.role_repo.find_by_id.return_value = role
        self.role_repo.find_by_name.return_value = None

        await self.service.update_role(
            role.id, name="inspector", description="Inspects", is_active=False
        )

        assert role.name == "inspector"
        assert role.description == "Inspects"
        assert role.is_active is False
        self.role_repo.save.assert_awaited_once_with(role)

    @pytest.mark.asyncio
    async def test_delete_role_not_found(self):
        self.role_repo.delete.return_value = False

        with pytest.raises(RoleNotFoundError):
            await self.service.delete_role(uuid4())

    @pytest.mark.asyncio
    async def test_assign_permission(self):
        role = make_role("auditor")
        permission = make_permission("users:read")
        self.role_repo.find_by_id.return_value = role
        self.permission_repo.find_by_id.return_value = permission
        self.role_repo.add_permission.return_value = role

        await self.service.assign_permission(role.id, permission.id)

        self.role_repo.add_permission.assert_awaited_once_with(role.id, permission.id)

    @pytest.mark.asyncio
    async def test_assign_permission_already_granted(self):
        role = make_role("auditor")
        permission = make_permission("users:read")
        role.add_permission(permission)
        self.role_repo.find_by_id.return_value = role
        self.permission_repo.find_by_id.return_value = permission

        with pytest.raises(PermissionAlreadyGrantedError):
            await self.service.assign_permission(role.id, permission.id)

    @pytest.mark.asyncio
    async def test_assign_unknown_permission(self):
        self.role_repo.find_by_id.return_value = make_role("auditor")
        self.permission_repo.find_by_id.return_value = None

        with pytest.raises(PermissionNotFoundError):
            await self.service.assign_permission(uuid4(), uuid4())

    @pytest.mark.asyncio
    async def test_remove_permission_not_granted(self):
        self.role_repo.find_by_id.return_value = make_role("auditor")
        self.permission_repo.find_by_id.return_value = make_permission("users:read")

        with pytest.raises(PermissionNotGrantedError):
            await self.service.remove_permission(uuid4(), uuid4())

        self.role_repo.remove_permission.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_role_permissions_empty_for_inactive_role(self):
        role = make_role("auditor", ["users:read"])
        role.deactivate()
        self.role_repo.find_by_id.return_value = role

        assert await self.service.get_role_permissions(role.id) == []

    @pytest.mark.asyncio
    async def test_get_role_permissions(self):
        role = make_role("auditor", ["users:read", "roles:read"])
        self.role_repo.find_by_id.return_value = role

        assert await self.service.get_role_permissions(role.id) == [
            "users:read",
            "roles:read",
        ]
