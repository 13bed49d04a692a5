from aegis_identity.domain.permission.repositories.permission_repository import (
    PermissionRepository,
)

__all__ = ["PermissionRepository"]
