"""Idempotent seeding of default reference data."""

from aegis_identity.application.seeding.bootstrap_seeder import (
    BootstrapSeeder,
    SeedReport,
    TransactionManager,
)
from aegis_identity.application.seeding.defaults import (
    DEFAULT_ADMIN_FIRST_NAME,
    DEFAULT_ADMIN_LAST_NAME,
    DEFAULT_PERMISSIONS,
    DEFAULT_ROLES,
    RoleDefinition,
)

__all__ = [
    "DEFAULT_ADMIN_FIRST_NAME",
    "DEFAULT_ADMIN_LAST_NAME",
    "DEFAULT_PERMISSIONS",
    "DEFAULT_ROLES",
    "BootstrapSeeder",
    "RoleDefinition",
    "SeedReport",
    "TransactionManager",
]
