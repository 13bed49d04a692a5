"""SQLAlchemy implementation of UserRepository."""

import logging
from collections.abc import Sequence
from typing import Union
from uuid import UUID

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from aegis_identity.domain.role import RoleNotFoundError
from aegis_identity.domain.shared.pagination import Page, PageRequest
from aegis_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    RoleAlreadyAssignedError,
    User,
    UserNotFoundError,
    UserRepository,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.repositories.mappers import (
    is_unique_violation,
    user_to_domain,
)

logger = logging.getLogger(__name__)


def _user_query() -> Select[tuple[UserModel]]:
    return (
        select(UserModel)
        .options(selectinload(UserModel.roles).selectinload(RoleModel.permissions))
        .execution_options(populate_existing=True)
    )


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)
        return user_to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        result = await self._session.execute(
            _user_query().where(UserModel.email == email_value)
        )
        model = result.scalar_one_or_none()
        return user_to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        stmt = select(UserModel.id).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)
        roles = await self._load_roles([r.id for r in user.roles])

        try:
            if existing:
                self._update_model(existing, user, roles)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user, roles))
                logger.debug("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete(self, user_id: UUID) -> bool:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted user: %s", user_id)
        return True

    async def add_role(self, user_id: UUID, role_id: UUID) -> User:
        model, role = await self._load_pair(user_id, role_id)
        if role not in model.roles:
            role_name = role.name
            model.roles.append(role)
            try:
                await self._session.flush()
            except IntegrityError as e:
                if is_unique_violation(e):
                    raise RoleAlreadyAssignedError(role_name) from e
                raise
            logger.debug("Assigned role %s to user %s", role.name, user_id)
        return user_to_domain(model)

    async def remove_role(self, user_id: UUID, role_id: UUID) -> User:
        model, role = await self._load_pair(user_id, role_id)
        if role in model.roles:
            model.roles.remove(role)
            await self._session.flush()
            logger.debug("Removed role %s from user %s", role.name, user_id)
        return user_to_domain(model)

    async def list_page(self, request: PageRequest) -> Page[User]:
        filters = []
        if request.search:
            pattern = f"%{request.search}%"
            filters.append(
                or_(
                    UserModel.email.ilike(pattern),
                    UserModel.first_name.ilike(pattern),
                    UserModel.last_name.ilike(pattern),
                )
            )
        if request.is_active is not None:
            filters.append(UserModel.is_active.is_(request.is_active))

        count_stmt = select(func.count()).select_from(UserModel).where(*filters)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            _user_query()
            .where(*filters)
            .order_by(UserModel.created_at.desc(), UserModel.email)
            .offset(request.offset)
            .limit(request.limit)
        )
        result = await self._session.execute(stmt)
        return Page(
            items=[user_to_domain(m) for m in result.scalars().all()],
            total=total,
            page=request.page,
            limit=request.limit,
        )

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _load_pair(
        self,
        user_id: UUID,
        role_id: UUID,
    ) -> tuple[UserModel, RoleModel]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))
        roles = await self._load_roles([role_id])
        if not roles:
            raise RoleNotFoundError(str(role_id))
        return model, roles[0]

    async def _load_roles(self, ids: Sequence[UUID]) -> list[RoleModel]:
        if not ids:
            return []
        stmt = (
            select(RoleModel)
            .options(selectinload(RoleModel.permissions))
            .where(RoleModel.id.in_(ids))
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        result = await self._session.execute(
            _user_query().where(UserModel.id == user_id)
        )
        return result.scalar_one_or_none()

    def _map_to_model(self, user: User, roles: list[RoleModel]) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            is_active=user.is_active,
            is_email_verified=user.is_email_verified,
            roles=roles,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(
        self,
        model: UserModel,
        user: User,
        roles: list[RoleModel],
    ) -> None:
        model.email = user.email
        model.password_hash = user.password_hash
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.is_active = user.is_active
        model.is_email_verified = user.is_email_verified
        model.roles = roles
        model.updated_at = user.updated_at
