"""User aggregate."""

from collections.abc import Iterable
from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from aegis_identity.domain.role.aggregates.role import Role
from aegis_identity.domain.shared.exceptions import ValidationError
from aegis_identity.domain.shared.time import utc_now
from aegis_identity.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Carries identity, profile, the bcrypt hash of the password and the
    user's roles (each with its permissions). The plaintext password never
    reaches this class.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        first_name: str = "",
        last_name: str = "",
        roles: Iterable[Role] = (),
        is_active: bool = True,
        is_email_verified: bool = False,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if not password_hash:
            msg = "Password hash cannot be empty"
            raise ValidationError(msg)
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._first_name = first_name
        self._last_name = last_name
        self._roles: dict[UUID, Role] = {}
        for role in roles:
            self._roles.setdefault(role.id, role)
        self._is_active = is_active
        self._is_email_verified = is_email_verified
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}".strip()

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_email_verified(self) -> bool:
        return self._is_email_verified

    @property
    def roles(self) -> tuple[Role, ...]:
        return tuple(self._roles.values())

    @property
    def role_names(self) -> list[str]:
        return [r.name for r in self._roles.values()]

    @property
    def permission_names(self) -> list[str]:
        """Union of permission names across all roles, first occurrence wins."""
        seen: dict[str, None] = {}
        for role in self._roles.values():
            for name in role.permission_names:
                seen.setdefault(name, None)
        return list(seen)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_role(self, name: str) -> bool:
        return any(r.name == name for r in self._roles.values())

    def has_role_id(self, role_id: UUID) -> bool:
        return role_id in self._roles

    def has_permission(self, name: str) -> bool:
        return any(r.has_permission(name) for r in self._roles.values())

    def assign_role(self, role: Role) -> bool:
        """Attach a role. Returns False if it was already attached."""
        if role.id in self._roles:
            return False
        self._roles[role.id] = role
        self._touch()
        return True

    def remove_role(self, role_id: UUID) -> bool:
        """Detach a role. Returns False if it was not attached."""
        if self._roles.pop(role_id, None) is None:
            return False
        self._touch()
        return True

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        if not password_hash:
            msg = "Password hash cannot be empty"
            raise ValidationError(msg)
        self._password_hash = password_hash
        self._touch()

    def update_profile(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> None:
        if first_name is not None:
            self._first_name = first_name
        if last_name is not None:
            self._last_name = last_name
        self._touch()

    def activate(self) -> None:
        self._is_active = True
        self._touch()

    def deactivate(self) -> None:
        self._is_active = False
        self._touch()

    def verify_email(self) -> None:
        self._is_email_verified = True
        self._touch()

    def mark_email_unverified(self) -> None:
        self._is_email_verified = False
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        first_name: str = "",
        last_name: str = "",
    ) -> "User":
        """New users start active, unverified and without roles."""
        return cls(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            is_active=True,
            is_email_verified=False,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        password_hash: str,
        first_name: str,
        last_name: str,
        is_active: bool,
        is_email_verified: bool,
        roles: Iterable[Role],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            is_active=is_active,
            is_email_verified=is_email_verified,
            roles=roles,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
