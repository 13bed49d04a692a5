"""Authenticated principal for request-scoped identity and claims."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from aegis_auth import TokenPayload
    from aegis_identity.domain.user import User


@dataclass(frozen=True)
class Principal:
    """Immutable claim set of the current authenticated user.

    Built once at login from the user's roles and embedded in the issued
    token; guards evaluate against this object and never against the store.
    """

    user_id: UUID
    email: str
    roles: frozenset[str] = field(default_factory=frozenset)
    permissions: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_user(cls, user: User) -> Principal:
        return cls(
            user_id=user.id,
            email=user.email,
            roles=frozenset(user.role_names),
            permissions=frozenset(user.permission_names),
        )

    @classmethod
    def from_token_payload(cls, payload: TokenPayload) -> Principal:
        return cls(
            user_id=payload.user_id,
            email=payload.email,
            roles=frozenset(payload.roles),
            permissions=frozenset(payload.permissions),
        )

    def has_role(self, name: str) -> bool:
        return name in self.roles

    def has_permission(self, name: str) -> bool:
        return name in self.permissions

    def __str__(self) -> str:
        return f"Principal({self.email})"
