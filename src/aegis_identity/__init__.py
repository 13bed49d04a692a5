"""Aegis Identity - users, roles, permissions and access decisions.

This package handles all identity-related concerns:
- Authorization model (User, Role, Permission aggregates)
- Authentication (login, registration, session re-validation)
- Authorization guards (role- and permission-based)
- Administration of users, roles and permissions
- Idempotent bootstrap seeding of default reference data
"""

from aegis_identity.application.authorization import (
    GuardConfigurationError,
    PermissionGuard,
    RoleGuard,
    permissions_allowed,
    roles_allowed,
)
from aegis_identity.application.context import Principal
from aegis_identity.application.seeding import BootstrapSeeder, SeedReport
from aegis_identity.application.services import (
    AuthenticationService,
    LoginResult,
    PermissionManagementService,
    RoleManagementService,
    UserManagementService,
)
from aegis_identity.domain.permission import (
    Permission,
    PermissionAlreadyExistsError,
    PermissionNotFoundError,
    PermissionRepository,
)
from aegis_identity.domain.role import (
    PermissionAlreadyGrantedError,
    PermissionNotGrantedError,
    Role,
    RoleAlreadyExistsError,
    RoleNotFoundError,
    RoleRepository,
)
from aegis_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    RoleAlreadyAssignedError,
    RoleNotAssignedError,
    User,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    # Domain - Permission
    "Permission",
    "PermissionAlreadyExistsError",
    "PermissionNotFoundError",
    "PermissionRepository",
    # Domain - Role
    "PermissionAlreadyGrantedError",
    "PermissionNotGrantedError",
    "Role",
    "RoleAlreadyExistsError",
    "RoleNotFoundError",
    "RoleRepository",
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "RoleAlreadyAssignedError",
    "RoleNotAssignedError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    # Application Context
    "Principal",
    # Authorization
    "GuardConfigurationError",
    "PermissionGuard",
    "RoleGuard",
    "permissions_allowed",
    "roles_allowed",
    # Application Services
    "AuthenticationService",
    "LoginResult",
    "PermissionManagementService",
    "RoleManagementService",
    "UserManagementService",
    # Seeding
    "BootstrapSeeder",
    "SeedReport",
]
