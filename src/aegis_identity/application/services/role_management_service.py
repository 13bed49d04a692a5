"""Administrative role management."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from uuid import UUID

from aegis_identity.domain.permission import PermissionNotFoundError
from aegis_identity.domain.role import (
    PermissionAlreadyGrantedError,
    PermissionNotGrantedError,
    Role,
    RoleAlreadyExistsError,
    RoleNotFoundError,
)

if TYPE_CHECKING:
    from aegis_identity.domain.permission import PermissionRepository
    from aegis_identity.domain.role import RoleRepository
    from aegis_identity.domain.shared import Page, PageRequest

logger = logging.getLogger(__name__)


class RoleManagementService:
    """Create, inspect and mutate roles and their permission grants."""

    def __init__(
        self,
        role_repository: RoleRepository,
        permission_repository: PermissionRepository,
    ):
        self._role_repo = role_repository
        self._permission_repo = permission_repository

    async def create_role(
        self,
        name: str,
        description: str | None = None,
        permission_ids: Iterable[UUID] = (),
    ) -> Role:
        role = Role.create(name=name, description=description)
        if await self._role_repo.find_by_name(role.name) is not None:
            raise RoleAlreadyExistsError(role.name)

        for permission_id in permission_ids:
            permission = await self._permission_repo.find_by_id(permission_id)
            if permission is None:
                logger.debug("Skipping unknown permission id %s", permission_id)
                continue
            role.add_permission(permission)

        await self._role_repo.save(role)
        logger.info("Role created: %s (%d permissions)", role.name, len(role.permissions))
        return role

    async def get_role(self, role_id: UUID) -> Role:
        role = await self._role_repo.find_by_id(role_id)
        if role is None:
            raise RoleNotFoundError(str(role_id))
        return role

    async def list_roles(self, request: PageRequest) -> Page[Role]:
        return await self._role_repo.list_page(request)

    async def update_role(
        self,
        role_id: UUID,
        name: str | None = None,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> Role:
        role = await self.get_role(role_id)

        if name is not None and name.strip() != role.name:
            existing = await self._role_repo.find_by_name(name.strip())
            if existing is not None and existing.id != role.id:
                raise RoleAlreadyExistsError(name.strip())
            role.rename(name)

        if description is not None:
            role.describe(description)

        if is_active is not None:
            if is_active:
                role.activate()
            else:
                role.deactivate()

        await self._role_repo.save(role)
        logger.info("Role updated: %s", role.name)
        return role

    async def delete_role(self, role_id: UUID) -> None:
        if not await self._role_repo.delete(role_id):
            raise RoleNotFoundError(str(role_id))
        logger.info("Role deleted: %s", role_id)

    async def assign_permission(self, role_id: UUID, permission_id: UUID) -> Role:
        role = await self.get_role(role_id)
        permission = await self._permission_repo.find_by_id(permission_id)
        if permission is None:
            raise PermissionNotFoundError(str(permission_id))
        if role.grants(permission.id):
            raise PermissionAlreadyGrantedError(role.name, permission.name)

        updated = await self._role_repo.add_permission(role_id, permission_id)
        logger.info("Permission %s granted to role %s", permission.name, role.name)
        return updated

    async def remove_permission(self, role_id: UUID, permission_id: UUID) -> Role:
        role = await self.get_role(role_id)
        permission = await self._permission_repo.find_by_id(permission_id)
        if permission is None:
            raise PermissionNotFoundError(str(permission_id))
        if not role.grants(permission.id):
            raise PermissionNotGrantedError(role.name, permission.name)

        updated = await self._role_repo.remove_permission(role_id, permission_id)
        logger.info("Permission %s revoked from role %s", permission.name, role.name)
        return updated

    async def activate_role(self, role_id: UUID) -> Role:
        return await self.update_role(role_id, is_active=True)

    async def deactivate_role(self, role_id: UUID) -> Role:
        return await self.update_role(role_id, is_active=False)

    async def get_role_permissions(self, role_id: UUID) -> list[str]:
        role = await self._role_repo.find_by_id(role_id)
        if role is None or not role.is_active:
            return []
        return role.permission_names
