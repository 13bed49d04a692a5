"""Database initialization utilities."""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register with Base.metadata
import aegis_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from aegis_auth import PasswordHashingService
from aegis_config.settings import Settings, get_settings
from aegis_identity.application.seeding import BootstrapSeeder, SeedReport
from aegis_identity.infrastructure.persistence.sqlalchemy import (
    Base,
    PermissionRepositorySQLAlchemy,
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    settings = settings or get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def run_bootstrap(
    session_maker: async_sessionmaker[AsyncSession],
    settings: Settings | None = None,
) -> SeedReport:
    """Seed default permissions, roles and the admin account.

    Errors propagate to the caller; at startup they abort the process.
    """
    settings = settings or get_settings()

    async with session_maker() as session:
        seeder = BootstrapSeeder(
            user_repository=UserRepositorySQLAlchemy(session),
            role_repository=RoleRepositorySQLAlchemy(session),
            permission_repository=PermissionRepositorySQLAlchemy(session),
            password_service=PasswordHashingService(
                rounds=settings.password_hash_rounds,
            ),
            transaction=session,
            admin_email=settings.bootstrap_admin_email,
            admin_password=settings.bootstrap_admin_password.get_secret_value(),
        )
        return await seeder.seed()
