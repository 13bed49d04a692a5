"""Bootstrap seeder for default permissions, roles and the admin account.

Every step is an existence check followed by a write, so running the
seeder on every start converges to the same state. Each created entity
and each grant is committed on its own; a unique-constraint conflict
raised by a concurrent seeder is treated as "already exists": the failed
write is rolled back, the row re-read, and seeding continues. Any other
failure propagates and is meant to abort startup.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TypeVar

from aegis_identity.application.seeding.defaults import (
    ADMIN_ROLE_NAME,
    DEFAULT_ADMIN_FIRST_NAME,
    DEFAULT_ADMIN_LAST_NAME,
    DEFAULT_PERMISSIONS,
    DEFAULT_ROLES,
    RoleDefinition,
)
from aegis_identity.domain.permission import Permission
from aegis_identity.domain.role import Role
from aegis_identity.domain.shared.exceptions import ConflictError
from aegis_identity.domain.user import User

if TYPE_CHECKING:
    from aegis_auth import PasswordHashingService
    from aegis_identity.domain.permission import PermissionRepository
    from aegis_identity.domain.role import RoleRepository
    from aegis_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TransactionManager(Protocol):
    """Unit-of-work boundary used by the seeder (an AsyncSession fits)."""

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


@dataclass
class SeedReport:
    created_permissions: list[str] = field(default_factory=list)
    created_roles: list[str] = field(default_factory=list)
    granted: list[tuple[str, str]] = field(default_factory=list)
    admin_created: bool = False

    @property
    def changed(self) -> bool:
        return bool(
            self.created_permissions
            or self.created_roles
            or self.granted
            or self.admin_created
        )


class BootstrapSeeder:
    def __init__(  # NOQA: PLR0913
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        permission_repository: PermissionRepository,
        password_service: PasswordHashingService,
        transaction: TransactionManager,
        admin_email: str,
        admin_password: str,
        permissions: Mapping[str, str] = DEFAULT_PERMISSIONS,
        roles: Sequence[RoleDefinition] = DEFAULT_ROLES,
    ):
        self._user_repo = user_repository
        self._role_repo = role_repository
        self._permission_repo = permission_repository
        self._password_service = password_service
        self._tx = transaction
        self._admin_email = admin_email
        self._admin_password = admin_password
        self._permissions = permissions
        self._roles = roles

    async def seed(self) -> SeedReport:
        report = SeedReport()
        await self._seed_permissions(report)
        await self._seed_roles(report)
        await self._seed_admin(report)
        logger.info(
            "Bootstrap seeding finished: %d permissions, %d roles, "
            "%d grants created; admin created: %s",
            len(report.created_permissions),
            len(report.created_roles),
            len(report.granted),
            report.admin_created,
        )
        return report

    async def _seed_permissions(self, report: SeedReport) -> None:
        for name, description in self._permissions.items():
            if await self._permission_repo.find_by_name(name) is not None:
                logger.debug("Permission %s already exists", name)
                continue

            permission = Permission.create(name=name, description=description)
            created = await self._create(
                lambda p=permission: self._permission_repo.save(p),
                lambda n=name: self._permission_repo.find_by_name(n),
            )
            if created:
                report.created_permissions.append(name)
                logger.info("Created permission: %s", name)

    async def _seed_roles(self, report: SeedReport) -> None:
        for definition in self._roles:
            role = await self._role_repo.find_by_name(definition.name)
            if role is None:
                new_role = Role.create(
                    name=definition.name,
                    description=definition.description,
                )
                created = await self._create(
                    lambda r=new_role: self._role_repo.save(r),
                    lambda n=definition.name: self._role_repo.find_by_name(n),
                )
                if created:
                    report.created_roles.append(definition.name)
                    logger.info("Created role: %s", definition.name)
                role = await self._require_role(definition.name)
            else:
                logger.debug("Role %s already exists", definition.name)

            for permission_name in definition.permissions:
                if role.has_permission(permission_name):
                    continue
                permission = await self._permission_repo.find_by_name(permission_name)
                if permission is None:
                    logger.warning(
                        "Permission %s for role %s does not exist, skipping",
                        permission_name,
                        definition.name,
                    )
                    continue
                granted = await self._create(
                    lambda r=role.id, p=permission.id: self._role_repo.add_permission(r, p),
                    lambda r=definition.name, p=permission_name: self._find_grant(r, p),
                )
                if granted:
                    report.granted.append((definition.name, permission_name))
                    logger.info(
                        "Granted permission %s to role %s",
                        permission_name,
                        definition.name,
                    )

    async def _seed_admin(self, report: SeedReport) -> None:
        if await self._user_repo.find_by_email(self._admin_email) is not None:
            logger.debug("Admin user %s already exists", self._admin_email)
            return

        admin = User.create(
            email=self._admin_email,
            password_hash=self._password_service.hash(self._admin_password),
            first_name=DEFAULT_ADMIN_FIRST_NAME,
            last_name=DEFAULT_ADMIN_LAST_NAME,
        )
        admin.verify_email()
        admin_role = await self._role_repo.find_by_name(ADMIN_ROLE_NAME)
        if admin_role is not None:
            admin.assign_role(admin_role)

        report.admin_created = await self._create(
            lambda: self._user_repo.save(admin),
            lambda: self._user_repo.find_by_email(self._admin_email),
        )
        if report.admin_created:
            logger.info("Created admin user: %s", admin.email)

    async def _create(
        self,
        write: Callable[[], Awaitable[object]],
        reread: Callable[[], Awaitable[T | None]],
    ) -> bool:
        """Run ``write`` and commit; returns False if a concurrent writer won."""
        try:
            await write()
            await self._tx.commit()
        except ConflictError:
            await self._tx.rollback()
            if await reread() is None:
                raise
            logger.info("Concurrent seeding detected, continuing with existing entity")
            return False
        return True

    async def _find_grant(self, role_name: str, permission_name: str) -> Role | None:
        role = await self._role_repo.find_by_name(role_name)
        if role is not None and role.has_permission(permission_name):
            return role
        return None

    async def _require_role(self, name: str) -> Role:
        role = await self._role_repo.find_by_name(name)
        if role is None:
            msg = f"Role {name} vanished during seeding"
            raise RuntimeError(msg)
        return role
