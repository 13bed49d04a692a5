"""
Repositories that lose an association-table race on purpose.

Each one commits the same association row as "another writer" after the
pair is loaded and before its own flush, so the flush hits the composite
primary key.
"""

from sqlalchemy import insert

from aegis_identity.infrastructure.persistence.sqlalchemy import (
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models import (
    role_permissions,
    user_roles,
)


class RacingRoleRepository(RoleRepositorySQLAlchemy):
    async def _load_pair(self, role_id, permission_id):
        pair = await super()._load_pair(role_id, permission_id)
        await self._session.execute(
            insert(role_permissions).values(
                role_id=role_id,
                permission_id=permission_id,
            )
        )
        await self._session.commit()
        return pair


class RacingUserRepository(UserRepositorySQLAlchemy):
    async def _load_pair(self, user_id, role_id):
        pair = await super()._load_pair(user_id, role_id)
        await self._session.execute(
            insert(user_roles).values(user_id=user_id, role_id=role_id)
        )
        await self._session.commit()
        return pair
