"""Role aggregate."""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID, uuid4

from aegis_identity.domain.permission.aggregates.permission import Permission
from aegis_identity.domain.shared.exceptions import ValidationError
from aegis_identity.domain.shared.time import utc_now


def _validate_name(name: str) -> str:
    normalized = (name or "").strip()
    if not normalized:
        msg = "Role name cannot be empty"
        raise ValidationError(msg)
    return normalized


class Role:
    """
    Role aggregate.

    Holds the set of permissions granted to every user carrying this role.
    The permission collection is always materialized: a role is either
    created empty or reconstituted together with its permissions.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        description: str | None = None,
        is_active: bool = True,
        permissions: Iterable[Permission] = (),
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = _validate_name(name)
        self._description = description
        self._is_active = is_active
        self._permissions: dict[UUID, Permission] = {}
        for permission in permissions:
            self._permissions.setdefault(permission.id, permission)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def permissions(self) -> tuple[Permission, ...]:
        return tuple(self._permissions.values())

    @property
    def permission_names(self) -> list[str]:
        return [p.name for p in self._permissions.values()]

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_permission(self, name: str) -> bool:
        """Exact, case-sensitive name match against granted permissions."""
        return any(p.name == name for p in self._permissions.values())

    def grants(self, permission_id: UUID) -> bool:
        return permission_id in self._permissions

    def add_permission(self, permission: Permission) -> bool:
        """Attach a permission. Returns False if it was already attached."""
        if permission.id in self._permissions:
            return False
        self._permissions[permission.id] = permission
        self._touch()
        return True

    def add_permissions(self, permissions: Iterable[Permission]) -> int:
        """Union the given permissions into this role; returns how many were new."""
        return sum(1 for p in permissions if self.add_permission(p))

    def remove_permission(self, permission_id: UUID) -> bool:
        """Detach a permission. Returns False if it was not attached."""
        if self._permissions.pop(permission_id, None) is None:
            return False
        self._touch()
        return True

    def rename(self, name: str) -> None:
        self._name = _validate_name(name)
        self._touch()

    def describe(self, description: str | None) -> None:
        self._description = description
        self._touch()

    def activate(self) -> None:
        self._is_active = True
        self._touch()

    def deactivate(self) -> None:
        self._is_active = False
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None = None,
    ) -> "Role":
        return cls(name=name, description=description, is_active=True)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        description: str | None,
        is_active: bool,
        permissions: Iterable[Permission],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Role":
        return cls(
            id=id,
            name=name,
            description=description,
            is_active=is_active,
            permissions=permissions,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Role(id={self._id}, name={self._name!r})"
