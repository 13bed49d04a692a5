"""Permission domain exceptions."""

from aegis_identity.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class PermissionNotFoundError(EntityNotFoundError):
    """Permission not found."""

    def __init__(self, permission_ref: str) -> None:
        self.permission_ref = permission_ref
        super().__init__(
            f"Permission not found: {permission_ref}",
            code=ErrorCode.PERMISSION_NOT_FOUND,
        )


class PermissionAlreadyExistsError(ConflictError):
    """Permission name already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Permission already exists with this name: {name}",
            code=ErrorCode.DUPLICATE_NAME,
        )
