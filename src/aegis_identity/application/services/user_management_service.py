"""Administrative user management."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from uuid import UUID

from aegis_identity.domain.role import RoleNotFoundError
from aegis_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    RoleAlreadyAssignedError,
    RoleNotAssignedError,
    User,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from aegis_auth import PasswordHashingService
    from aegis_identity.domain.role import RoleRepository
    from aegis_identity.domain.shared import Page, PageRequest
    from aegis_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserManagementService:
    """Create, inspect and mutate users and their role assignments."""

    def __init__(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._role_repo = role_repository
        self._password_service = password_service

    async def create_user(  # NOQA: PLR0913
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role_ids: Iterable[UUID] = (),
    ) -> User:
        normalized = Email(email)
        if await self._user_repo.exists_by_email(normalized):
            raise EmailAlreadyExistsError(normalized.value)

        roles = []
        for role_id in role_ids:
            role = await self._role_repo.find_by_id(role_id)
            if role is None:
                raise RoleNotFoundError(str(role_id))
            roles.append(role)

        user = User.create(
            email=normalized,
            password_hash=self._password_service.hash(password),
            first_name=first_name,
            last_name=last_name,
        )
        for role in roles:
            user.assign_role(role)
        await self._user_repo.save(user)

        logger.info("User created: %s (roles: %s)", user.email, user.role_names)
        return user

    async def get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def list_users(self, request: PageRequest) -> Page[User]:
        return await self._user_repo.list_page(request)

    async def update_user(  # NOQA: PLR0913
        self,
        user_id: UUID,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        is_active: bool | None = None,
        is_email_verified: bool | None = None,
    ) -> User:
        user = await self.get_user(user_id)

        if email is not None:
            new_email = Email(email)
            if new_email != user.email_obj:
                if await self._user_repo.exists_by_email(new_email):
                    raise EmailAlreadyExistsError(new_email.value)
                user.change_email(new_email)

        if first_name is not None or last_name is not None:
            user.update_profile(first_name=first_name, last_name=last_name)

        if is_active is not None:
            if is_active:
                user.activate()
            else:
                user.deactivate()

        if is_email_verified is not None:
            if is_email_verified:
                user.verify_email()
            else:
                user.mark_email_unverified()

        await self._user_repo.save(user)
        logger.info("User updated: %s", user_id)
        return user

    async def delete_user(self, user_id: UUID) -> None:
        if not await self._user_repo.delete(user_id):
            raise UserNotFoundError(str(user_id))
        logger.info("User deleted: %s", user_id)

    async def assign_role(self, user_id: UUID, role_id: UUID) -> User:
        user = await self.get_user(user_id)
        role = await self._role_repo.find_by_id(role_id)
        if role is None:
            raise RoleNotFoundError(str(role_id))
        if user.has_role_id(role.id):
            raise RoleAlreadyAssignedError(role.name)

        updated = await self._user_repo.add_role(user_id, role_id)
        logger.info("Role %s assigned to user %s", role.name, user_id)
        return updated

    async def remove_role(self, user_id: UUID, role_id: UUID) -> User:
        user = await self.get_user(user_id)
        role = await self._role_repo.find_by_id(role_id)
        if role is None:
            raise RoleNotFoundError(str(role_id))
        if not user.has_role_id(role.id):
            raise RoleNotAssignedError(role.name)

        updated = await self._user_repo.remove_role(user_id, role_id)
        logger.info("Role %s removed from user %s", role.name, user_id)
        return updated

    async def activate_user(self, user_id: UUID) -> User:
        user = await self.get_user(user_id)
        user.activate()
        await self._user_repo.save(user)
        logger.info("User activated: %s", user_id)
        return user

    async def deactivate_user(self, user_id: UUID) -> User:
        user = await self.get_user(user_id)
        user.deactivate()
        await self._user_repo.save(user)
        logger.info("User deactivated: %s", user_id)
        return user

    async def verify_email(self, user_id: UUID) -> User:
        user = await self.get_user(user_id)
        user.verify_email()
        await self._user_repo.save(user)
        return user

    async def check_permission(self, user_id: UUID, permission_name: str) -> bool:
        user = await self._user_repo.find_by_id(user_id)
        if user is None or not user.is_active:
            return False
        return user.has_permission(permission_name)

    async def get_permissions(self, user_id: UUID) -> list[str]:
        user = await self._user_repo.find_by_id(user_id)
        if user is None or not user.is_active:
            return []
        return user.permission_names
