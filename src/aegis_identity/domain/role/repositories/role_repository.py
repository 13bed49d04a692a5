"""Role repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from aegis_identity.domain.role.aggregates.role import Role
from aegis_identity.domain.shared.pagination import Page, PageRequest


class RoleRepository(ABC):
    """Repository interface for Role aggregates.

    Every role returned carries its permissions.
    """

    @abstractmethod
    async def find_by_id(self, role_id: UUID) -> Role | None:
        """Find a role by its ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Role | None:
        """Find a role by its exact (case-sensitive) name."""

    @abstractmethod
    async def save(self, role: Role) -> None:
        """Create or update a role and its permission set.

        Raises RoleAlreadyExistsError on a name collision.
        """

    @abstractmethod
    async def delete(self, role_id: UUID) -> bool:
        """Delete a role by ID. Returns False if it did not exist."""

    @abstractmethod
    async def list_page(self, request: PageRequest) -> Page[Role]:
        """List roles ordered by name, optionally filtered."""

    @abstractmethod
    async def add_permission(self, role_id: UUID, permission_id: UUID) -> Role:
        """Grant a permission to a role (set-union, idempotent).

        Raises RoleNotFoundError / PermissionNotFoundError when either side
        is missing. A grant that loses a race with a concurrent writer
        raises PermissionAlreadyGrantedError.
        """

    @abstractmethod
    async def remove_permission(self, role_id: UUID, permission_id: UUID) -> Role:
        """Revoke a permission from a role (no-op if not granted).

        Raises RoleNotFoundError / PermissionNotFoundError when either side
        is missing.
        """
