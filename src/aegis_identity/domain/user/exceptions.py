"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from aegis_identity.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User already exists with this email",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_ref: str) -> None:
        self.user_ref = user_ref
        super().__init__(
            f"User not found: {user_ref}",
            code=ErrorCode.USER_NOT_FOUND,
        )


class RoleAlreadyAssignedError(ConflictError):
    """User already carries the role."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(
            f"User already has role {role_name}",
            code=ErrorCode.ROLE_ALREADY_ASSIGNED,
        )


class RoleNotAssignedError(BusinessRuleViolation):
    """User does not carry the role."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(
            f"User does not have role {role_name}",
            code=ErrorCode.ROLE_NOT_ASSIGNED,
        )
