# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity management."""

from aegis_identity.infrastructure.persistence.sqlalchemy.models.association import (
    role_permissions,
    user_roles,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models.permission_model import (
    PermissionModel,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models.role_model import (
    RoleModel,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "PermissionModel",
    "RoleModel",
    "UserModel",
    "role_permissions",
    "user_roles",
]
