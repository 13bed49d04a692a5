"""Default permissions, roles and administrator profile."""

from dataclasses import dataclass

DEFAULT_PERMISSIONS: dict[str, str] = {
    "users:create": "Create users",
    "users:read": "Read users",
    "users:update": "Update users",
    "users:delete": "Delete users",
    "roles:create": "Create roles",
    "roles:read": "Read roles",
    "roles:update": "Update roles",
    "roles:delete": "Delete roles",
    "permissions:create": "Create permissions",
    "permissions:read": "Read permissions",
    "permissions:update": "Update permissions",
    "permissions:delete": "Delete permissions",
    "profile:read": "Read own profile",
}


@dataclass(frozen=True)
class RoleDefinition:
    name: str
    description: str
    permissions: tuple[str, ...]


DEFAULT_ROLES: tuple[RoleDefinition, ...] = (
    RoleDefinition(
        name="admin",
        description="Administrator with full access",
        permissions=tuple(DEFAULT_PERMISSIONS),
    ),
    RoleDefinition(
        name="moderator",
        description="Moderator with limited administrative access",
        permissions=(
            "users:read",
            "users:update",
            "roles:read",
            "permissions:read",
            "profile:read",
        ),
    ),
    RoleDefinition(
        name="user",
        description="Regular user",
        permissions=("profile:read",),
    ),
)

ADMIN_ROLE_NAME = "admin"
DEFAULT_ADMIN_FIRST_NAME = "Admin"
DEFAULT_ADMIN_LAST_NAME = "User"
