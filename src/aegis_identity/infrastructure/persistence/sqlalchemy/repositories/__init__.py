# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from aegis_identity.infrastructure.persistence.sqlalchemy.repositories.permission_repository import (
    PermissionRepositorySQLAlchemy,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.repositories.role_repository import (
    RoleRepositorySQLAlchemy,
)
from aegis_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "PermissionRepositorySQLAlchemy",
    "RoleRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
