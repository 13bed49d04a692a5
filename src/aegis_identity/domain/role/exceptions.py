"""Role domain exceptions."""

from aegis_identity.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class RoleNotFoundError(EntityNotFoundError):
    """Role not found."""

    def __init__(self, role_ref: str) -> None:
        self.role_ref = role_ref
        super().__init__(
            f"Role not found: {role_ref}",
            code=ErrorCode.ROLE_NOT_FOUND,
        )


class RoleAlreadyExistsError(ConflictError):
    """Role name already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Role already exists with this name: {name}",
            code=ErrorCode.DUPLICATE_NAME,
        )


class PermissionAlreadyGrantedError(ConflictError):
    """Permission is already attached to the role."""

    def __init__(self, role_name: str, permission_name: str) -> None:
        self.role_name = role_name
        self.permission_name = permission_name
        super().__init__(
            f"Role {role_name} already has permission {permission_name}",
            code=ErrorCode.PERMISSION_ALREADY_GRANTED,
        )


class PermissionNotGrantedError(BusinessRuleViolation):
    """Permission is not attached to the role."""

    def __init__(self, role_name: str, permission_name: str) -> None:
        self.role_name = role_name
        self.permission_name = permission_name
        super().__init__(
            f"Role {role_name} does not have permission {permission_name}",
            code=ErrorCode.PERMISSION_NOT_GRANTED,
        )
