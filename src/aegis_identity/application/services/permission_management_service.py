"""Administrative permission management."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from aegis_identity.domain.permission import (
    Permission,
    PermissionAlreadyExistsError,
    PermissionNotFoundError,
)

if TYPE_CHECKING:
    from aegis_identity.domain.permission import PermissionRepository

logger = logging.getLogger(__name__)


class PermissionManagementService:
    def __init__(self, permission_repository: PermissionRepository):
        self._permission_repo = permission_repository

    async def create_permission(
        self,
        name: str,
        description: str | None = None,
    ) -> Permission:
        permission = Permission.create(name=name, description=description)
        if await self._permission_repo.find_by_name(permission.name) is not None:
            raise PermissionAlreadyExistsError(permission.name)

        await self._permission_repo.save(permission)
        logger.info("Permission created: %s", permission.name)
        return permission

    async def get_permission(self, permission_id: UUID) -> Permission:
        permission = await self._permission_repo.find_by_id(permission_id)
        if permission is None:
            raise PermissionNotFoundError(str(permission_id))
        return permission

    async def list_permissions(self) -> list[Permission]:
        return await self._permission_repo.list_all()

    async def update_permission(
        self,
        permission_id: UUID,
        name: str | None = None,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> Permission:
        permission = await self.get_permission(permission_id)

        if name is not None and name.strip() != permission.name:
            existing = await self._permission_repo.find_by_name(name.strip())
            if existing is not None and existing.id != permission.id:
                raise PermissionAlreadyExistsError(name.strip())
            permission.rename(name)

        if description is not None:
            permission.describe(description)

        if is_active is not None:
            if is_active:
                permission.activate()
            else:
                permission.deactivate()

        await self._permission_repo.save(permission)
        logger.info("Permission updated: %s", permission.name)
        return permission

    async def delete_permission(self, permission_id: UUID) -> None:
        if not await self._permission_repo.delete(permission_id):
            raise PermissionNotFoundError(str(permission_id))
        logger.info("Permission deleted: %s", permission_id)

    async def activate_permission(self, permission_id: UUID) -> Permission:
        return await self.update_permission(permission_id, is_active=True)

    async def deactivate_permission(self, permission_id: UUID) -> Permission:
        return await self.update_permission(permission_id, is_active=False)
