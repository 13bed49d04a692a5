"""Per-request authorization decisions."""

from aegis_identity.application.authorization.guards import (
    GuardConfigurationError,
    PermissionGuard,
    RoleGuard,
    permissions_allowed,
    roles_allowed,
)

__all__ = [
    "GuardConfigurationError",
    "PermissionGuard",
    "RoleGuard",
    "permissions_allowed",
    "roles_allowed",
]
