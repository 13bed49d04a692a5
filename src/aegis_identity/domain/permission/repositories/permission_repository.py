"""Permission repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from aegis_identity.domain.permission.aggregates.permission import Permission


class PermissionRepository(ABC):
    """Repository interface for Permission aggregates."""

    @abstractmethod
    async def find_by_id(self, permission_id: UUID) -> Permission | None:
        """Find a permission by its ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Permission | None:
        """Find a permission by its exact (case-sensitive) name."""

    @abstractmethod
    async def save(self, permission: Permission) -> None:
        """Create or update a permission.

        Raises PermissionAlreadyExistsError on a name collision.
        """

    @abstractmethod
    async def delete(self, permission_id: UUID) -> bool:
        """Delete a permission by ID. Returns False if it did not exist."""

    @abstractmethod
    async def list_all(self) -> list[Permission]:
        """List all permissions ordered by name."""
