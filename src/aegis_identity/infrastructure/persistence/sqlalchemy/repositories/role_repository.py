"""SQLAlchemy implementation of RoleRepository."""

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from aegis_identity.domain.permission import PermissionNotFoundError
from aegis_identity.domain.role import (
    PermissionAlreadyGrantedError,
    Role,
    RoleAlreadyExistsError,
    RoleNotFoundError,
    RoleRepository,
)
from aegis_identity.domain.shared.pagination import Page, PageRequest
from aegis_identity.infrastructure.persistence.sqlalchemy.models import (
    PermissionModel,
    RoleModel,
    user_roles,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.repositories.mappers import (
    is_unique_violation,
    role_to_domain,
)

logger = logging.getLogger(__name__)


def _role_query() -> Select[tuple[RoleModel]]:
    return (
        select(RoleModel)
        .options(selectinload(RoleModel.permissions))
        .execution_options(populate_existing=True)
    )


class RoleRepositorySQLAlchemy(RoleRepository):
    """SQLAlchemy implementation of the RoleRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, role_id: UUID) -> Role | None:
        model = await self._find_model_by_id(role_id)
        return role_to_domain(model) if model else None

    async def find_by_name(self, name: str) -> Role | None:
        result = await self._session.execute(
            _role_query().where(RoleModel.name == name)
        )
        model = result.scalar_one_or_none()
        return role_to_domain(model) if model else None

    async def save(self, role: Role) -> None:
        existing = await self._find_model_by_id(role.id)
        permissions = await self._load_permissions([p.id for p in role.permissions])

        try:
            if existing:
                existing.name = role.name
                existing.description = role.description
                existing.is_active = role.is_active
                existing.permissions = permissions
                existing.updated_at = role.updated_at
                logger.debug("Updated role: %s", role.name)
            else:
                self._session.add(
                    RoleModel(
                        id=role.id,
                        name=role.name,
                        description=role.description,
                        is_active=role.is_active,
                        permissions=permissions,
                        created_at=role.created_at,
                        updated_at=role.updated_at,
                    )
                )
                logger.debug("Created role: %s", role.name)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise RoleAlreadyExistsError(role.name) from e
            raise

    async def delete(self, role_id: UUID) -> bool:
        model = await self._find_model_by_id(role_id)
        if model is None:
            return False

        await self._session.execute(
            delete(user_roles).where(user_roles.c.role_id == role_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted role: %s", model.name)
        return True

    async def list_page(self, request: PageRequest) -> Page[Role]:
        filters = []
        if request.search:
            filters.append(RoleModel.name.ilike(f"%{request.search}%"))
        if request.is_active is not None:
            filters.append(RoleModel.is_active.is_(request.is_active))

        count_stmt = select(func.count()).select_from(RoleModel).where(*filters)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            _role_query()
            .where(*filters)
            .order_by(RoleModel.name)
            .offset(request.offset)
            .limit(request.limit)
        )
        result = await self._session.execute(stmt)
        return Page(
            items=[role_to_domain(m) for m in result.scalars().all()],
            total=total,
            page=request.page,
            limit=request.limit,
        )

    async def add_permission(self, role_id: UUID, permission_id: UUID) -> Role:
        model, permission = await self._load_pair(role_id, permission_id)
        if permission not in model.permissions:
            role_name, permission_name = model.name, permission.name
            model.permissions.append(permission)
            try:
                await self._session.flush()
            except IntegrityError as e:
                if is_unique_violation(e):
                    raise PermissionAlreadyGrantedError(role_name, permission_name) from e
                raise
            logger.debug("Granted %s to role %s", permission.name, model.name)
        return role_to_domain(model)

    async def remove_permission(self, role_id: UUID, permission_id: UUID) -> Role:
        model, permission = await self._load_pair(role_id, permission_id)
        if permission in model.permissions:
            model.permissions.remove(permission)
            await self._session.flush()
            logger.debug("Revoked %s from role %s", permission.name, model.name)
        return role_to_domain(model)

    async def _load_pair(
        self,
        role_id: UUID,
        permission_id: UUID,
    ) -> tuple[RoleModel, PermissionModel]:
        model = await self._find_model_by_id(role_id)
        if model is None:
            raise RoleNotFoundError(str(role_id))
        permission = await self._session.get(PermissionModel, permission_id)
        if permission is None:
            raise PermissionNotFoundError(str(permission_id))
        return model, permission

    async def _load_permissions(self, ids: Sequence[UUID]) -> list[PermissionModel]:
        if not ids:
            return []
        stmt = select(PermissionModel).where(PermissionModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def _find_model_by_id(self, role_id: UUID) -> RoleModel | None:
        result = await self._session.execute(
            _role_query().where(RoleModel.id == role_id)
        )
        return result.scalar_one_or_none()
