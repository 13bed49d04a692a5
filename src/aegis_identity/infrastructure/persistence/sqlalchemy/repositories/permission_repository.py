"""SQLAlchemy implementation of PermissionRepository."""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from aegis_identity.domain.permission import (
    Permission,
    PermissionAlreadyExistsError,
    PermissionRepository,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models import (
    PermissionModel,
    role_permissions,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.repositories.mappers import (
    is_unique_violation,
    permission_to_domain,
)

logger = logging.getLogger(__name__)


class PermissionRepositorySQLAlchemy(PermissionRepository):
    """SQLAlchemy implementation of the PermissionRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, permission_id: UUID) -> Permission | None:
        model = await self._find_model_by_id(permission_id)
        return permission_to_domain(model) if model else None

    async def find_by_name(self, name: str) -> Permission | None:
        stmt = (
            select(PermissionModel)
            .where(PermissionModel.name == name)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return permission_to_domain(model) if model else None

    async def save(self, permission: Permission) -> None:
        existing = await self._find_model_by_id(permission.id)

        try:
            if existing:
                existing.name = permission.name
                existing.description = permission.description
                existing.is_active = permission.is_active
                existing.updated_at = permission.updated_at
                logger.debug("Updated permission: %s", permission.name)
            else:
                self._session.add(
                    PermissionModel(
                        id=permission.id,
                        name=permission.name,
                        description=permission.description,
                        is_active=permission.is_active,
                        created_at=permission.created_at,
                        updated_at=permission.updated_at,
                    )
                )
                logger.debug("Created permission: %s", permission.name)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise PermissionAlreadyExistsError(permission.name) from e
            raise

    async def delete(self, permission_id: UUID) -> bool:
        model = await self._find_model_by_id(permission_id)
        if model is None:
            return False

        await self._session.execute(
            delete(role_permissions).where(
                role_permissions.c.permission_id == permission_id
            )
        )
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted permission: %s", model.name)
        return True

    async def list_all(self) -> list[Permission]:
        stmt = select(PermissionModel).order_by(PermissionModel.name)
        result = await self._session.execute(stmt)
        return [permission_to_domain(m) for m in result.scalars().all()]

    async def _find_model_by_id(self, permission_id: UUID) -> PermissionModel | None:
        stmt = (
            select(PermissionModel)
            .where(PermissionModel.id == permission_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
