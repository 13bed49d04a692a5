"""Role domain.

A role is a named bundle of permissions (``admin``, ``moderator``,
``user``). Users receive permissions only through their roles.
"""

from aegis_identity.domain.role.aggregates import Role
from aegis_identity.domain.role.exceptions import (
    PermissionAlreadyGrantedError,
    PermissionNotGrantedError,
    RoleAlreadyExistsError,
    RoleNotFoundError,
)
from aegis_identity.domain.role.repositories import RoleRepository

__all__ = [
    "PermissionAlreadyGrantedError",
    "PermissionNotGrantedError",
    "Role",
    "RoleAlreadyExistsError",
    "RoleNotFoundError",
    "RoleRepository",
]
