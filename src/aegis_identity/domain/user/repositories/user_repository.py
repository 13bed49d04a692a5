"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from aegis_identity.domain.shared.pagination import Page, PageRequest
from aegis_identity.domain.user.aggregates.user import User
from aegis_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Every user returned carries its roles, and every role its permissions.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their (normalized) email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Create or update a user, including its role assignments.

        Raises EmailAlreadyExistsError on an email collision.
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete a user by ID. Returns False if it did not exist."""

    @abstractmethod
    async def add_role(self, user_id: UUID, role_id: UUID) -> User:
        """Assign a role to a user (idempotent).

        Raises UserNotFoundError / RoleNotFoundError when either side is
        missing. An assignment that loses a race with a concurrent writer
        raises RoleAlreadyAssignedError.
        """

    @abstractmethod
    async def remove_role(self, user_id: UUID, role_id: UUID) -> User:
        """Remove a role from a user (no-op if not assigned).

        Raises UserNotFoundError / RoleNotFoundError when either side is
        missing.
        """

    @abstractmethod
    async def list_page(self, request: PageRequest) -> Page[User]:
        """List users newest first, filtered by search text and active flag."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
