"""Pydantic schemas for API request/response models."""

from aegis.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    PrincipalResponse,
    RegisterRequest,
)
from aegis.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from aegis.presentation.api.schemas.media import MediaResponse
from aegis.presentation.api.schemas.permissions import (
    PermissionCreateRequest,
    PermissionResponse,
    PermissionUpdateRequest,
)
from aegis.presentation.api.schemas.roles import (
    RoleCreateRequest,
    RoleListResponse,
    RolePermissionRequest,
    RolePermissionsResponse,
    RoleResponse,
    RoleSummary,
    RoleUpdateRequest,
)
from aegis.presentation.api.schemas.users import (
    UserCreateRequest,
    UserListResponse,
    UserPermissionsResponse,
    UserResponse,
    UserRoleRequest,
    UserUpdateRequest,
)

__all__ = [
    # Auth
    "AuthResponse",
    "ChangePasswordRequest",
    "LoginRequest",
    "PrincipalResponse",
    "RegisterRequest",
    # Common
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    # Media
    "MediaResponse",
    # Permissions
    "PermissionCreateRequest",
    "PermissionResponse",
    "PermissionUpdateRequest",
    # Roles
    "RoleCreateRequest",
    "RoleListResponse",
    "RolePermissionRequest",
    "RolePermissionsResponse",
    "RoleResponse",
    "RoleSummary",
    "RoleUpdateRequest",
    # Users
    "UserCreateRequest",
    "UserListResponse",
    "UserPermissionsResponse",
    "UserResponse",
    "UserRoleRequest",
    "UserUpdateRequest",
]
