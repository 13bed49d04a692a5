"""Application services for identity management."""

from aegis_identity.application.services.authentication_service import (
    AuthenticationService,
    LoginResult,
)
from aegis_identity.application.services.permission_management_service import (
    PermissionManagementService,
)
from aegis_identity.application.services.role_management_service import (
    RoleManagementService,
)
from aegis_identity.application.services.user_management_service import (
    UserManagementService,
)

__all__ = [
    "AuthenticationService",
    "LoginResult",
    "PermissionManagementService",
    "RoleManagementService",
    "UserManagementService",
]
