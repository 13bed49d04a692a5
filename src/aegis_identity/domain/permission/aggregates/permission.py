"""Permission aggregate."""

from datetime import datetime
from uuid import UUID, uuid4

from aegis_identity.domain.shared.exceptions import ValidationError
from aegis_identity.domain.shared.time import utc_now


def _validate_name(name: str) -> str:
    normalized = (name or "").strip()
    if not normalized:
        msg = "Permission name cannot be empty"
        raise ValidationError(msg)
    return normalized


class Permission:
    """A named capability, e.g. ``users:read``.

    Names are compared case-sensitively; there are no wildcard or
    hierarchy semantics (``users:*`` does not imply ``users:read``).
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        description: str | None = None,
        is_active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = _validate_name(name)
        self._description = description
        self._is_active = is_active
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
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

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
    ) -> "Permission":
        return cls(name=name, description=description, is_active=True)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        description: str | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Permission":
        return cls(
            id=id,
            name=name,
            description=description,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Permission(id={self._id}, name={self._name!r})"
