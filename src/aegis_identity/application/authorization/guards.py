"""Role and permission guards.

Both guards follow the same rule: no declared requirement allows every
caller, otherwise the caller needs at least one of the declared names.
Names are compared by exact, case-sensitive match.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from aegis_identity.domain.shared.exceptions import ForbiddenError

if TYPE_CHECKING:
    from aegis_identity.application.context import Principal

logger = logging.getLogger(__name__)


class GuardConfigurationError(ValueError):
    """Raised when a guard is declared with an explicitly empty requirement."""


def _normalize(required: Iterable[str] | None, kind: str) -> frozenset[str] | None:
    if required is None:
        return None
    names = frozenset(required)
    if not names:
        msg = (
            f"Empty {kind} requirement declared; omit the guard "
            f"instead of declaring no {kind}"
        )
        raise GuardConfigurationError(msg)
    return names


def _any_match(required: frozenset[str] | None, granted: Iterable[str] | None) -> bool:
    if required is None:
        return True
    if not granted:
        return False
    return not required.isdisjoint(granted)


def roles_allowed(
    required_roles: Iterable[str] | None,
    principal_roles: Iterable[str] | None,
) -> bool:
    """Decide whether a caller with ``principal_roles`` passes a role guard.

    Parameters
    ----------
    required_roles
        Declared role names, or None when the route declares none
    principal_roles
        Role names of the caller, or None when unauthenticated

    Raises
    ------
    GuardConfigurationError
        If ``required_roles`` is present but empty
    """
    return _any_match(_normalize(required_roles, "roles"), principal_roles)


def permissions_allowed(
    required_permissions: Iterable[str] | None,
    principal_permissions: Iterable[str] | None,
) -> bool:
    """Permission counterpart of :func:`roles_allowed`."""
    return _any_match(
        _normalize(required_permissions, "permissions"),
        principal_permissions,
    )


@dataclass(frozen=True)
class RoleGuard:
    """Role requirement declared for a route.

    Validated at construction so a misconfigured route fails when the
    application is assembled rather than on the first request.
    """

    required: frozenset[str] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "required", _normalize(self.required, "roles"))

    def allows(self, principal: Principal | None) -> bool:
        return _any_match(self.required, principal.roles if principal else None)

    def enforce(self, principal: Principal | None) -> None:
        if not self.allows(principal):
            logger.warning(
                "Role guard denied %s (required any of %s)",
                principal or "anonymous",
                sorted(self.required or ()),
            )
            raise ForbiddenError


@dataclass(frozen=True)
class PermissionGuard:
    """Permission requirement declared for a route."""

    required: frozenset[str] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "required", _normalize(self.required, "permissions")
        )

    def allows(self, principal: Principal | None) -> bool:
        return _any_match(
            self.required, principal.permissions if principal else None
        )

    def enforce(self, principal: Principal | None) -> None:
        if not self.allows(principal):
            logger.warning(
                "Permission guard denied %s (required any of %s)",
                principal or "anonymous",
                sorted(self.required or ()),
            )
            raise ForbiddenError
