"""User domain.

This domain handles:
- User aggregate (identity, profile, credential hash, roles)
- Derived authorization queries (has_role, has_permission)
"""

from aegis_identity.domain.user.aggregates import User
from aegis_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    RoleAlreadyAssignedError,
    RoleNotAssignedError,
    UserNotFoundError,
)
from aegis_identity.domain.user.repositories import UserRepository
from aegis_identity.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "RoleAlreadyAssignedError",
    "RoleNotAssignedError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
