"""Permission domain.

A permission is a named capability following the ``resource:action``
convention (for example ``users:read``).
"""

from aegis_identity.domain.permission.aggregates import Permission
from aegis_identity.domain.permission.exceptions import (
    PermissionAlreadyExistsError,
    PermissionNotFoundError,
)
from aegis_identity.domain.permission.repositories import PermissionRepository

__all__ = [
    "Permission",
    "PermissionAlreadyExistsError",
    "PermissionNotFoundError",
    "PermissionRepository",
]
