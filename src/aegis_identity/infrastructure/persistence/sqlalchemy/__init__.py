"""SQLAlchemy implementation for aegis_identity persistence.

Provides:
- Base / TimestampMixin: declarative base for identity models
- UserModel, RoleModel, PermissionModel and the association tables
- UserRepositorySQLAlchemy, RoleRepositorySQLAlchemy,
  PermissionRepositorySQLAlchemy: repository implementations
"""

from aegis_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.models import (
    PermissionModel,
    RoleModel,
    UserModel,
    role_permissions,
    user_roles,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.repositories import (
    PermissionRepositorySQLAlchemy,
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "PermissionModel",
    "PermissionRepositorySQLAlchemy",
    "RoleModel",
    "RoleRepositorySQLAlchemy",
    "TimestampMixin",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "role_permissions",
    "user_roles",
]
