"""FastAPI dependency injection for the Aegis API.

Provides dependencies for:
- Database sessions
- Authentication (current principal from JWT)
- Role and permission guards
- Service instances
- Optional media storage and cache clients
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, params, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from aegis.application.ports import MediaDisabledError, MediaStorage
from aegis.infrastructure.cache import RedisCacheService
from aegis.infrastructure.media import CloudinaryMediaStorage
from aegis.infrastructure.system import HealthChecker
from aegis.presentation.api.config import get_api_settings
from aegis_auth import InvalidTokenError, JWTService, PasswordHashingService
from aegis_config.settings import Settings, get_settings
from aegis_identity.application.authorization import PermissionGuard, RoleGuard
from aegis_identity.application.context import Principal
from aegis_identity.application.services import (
    AuthenticationService,
    PermissionManagementService,
    RoleManagementService,
    UserManagementService,
)
from aegis_identity.infrastructure.persistence.sqlalchemy import (
    PermissionRepositorySQLAlchemy,
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Uncommitted work is rolled back when the session closes, so routers
    only commit on success.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service with the configured cost factor."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates user registration, login and session checks.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Principal (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_principal(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> Principal:
    """
    FastAPI dependency to get the current authenticated principal from JWT.

    Verifies the bearer token, then re-validates the subject against the
    user store. Roles and permissions come from the token claims.

    Parameters
    ----------
    auth_service
        Authentication service used for session re-validation
    credentials
        Bearer token from Authorization header
    jwt_service
        JWT service for token verification

    Returns
    -------
    The authenticated Principal

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or the user is gone or inactive
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    user = await auth_service.validate_session(payload.user_id)
    if user is None:
        logger.warning("Session rejected for token subject: %s", payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return Principal.from_token_payload(payload)


# Type alias for injected current principal
CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


# -----------------------------------------------------------------------------
# Guards
# -----------------------------------------------------------------------------


def require_roles(*names: str) -> params.Depends:
    """Build a dependency admitting principals holding any of ``names``.

    The guard is validated here, so an empty declaration fails at import.

    Examples
    --------
    >>> AdminPrincipal = Annotated[Principal, require_roles("admin")]
    """
    guard = RoleGuard(frozenset(names))

    async def _enforce(principal: CurrentPrincipal) -> Principal:
        guard.enforce(principal)
        return principal

    return Depends(_enforce)


def require_permissions(*names: str) -> params.Depends:
    """Build a dependency admitting principals holding any of ``names``."""
    guard = PermissionGuard(frozenset(names))

    async def _enforce(principal: CurrentPrincipal) -> Principal:
        guard.enforce(principal)
        return principal

    return Depends(_enforce)


# Type alias for the admin role guard
AdminPrincipal = Annotated[Principal, require_roles("admin")]


# -----------------------------------------------------------------------------
# Administration Services
# -----------------------------------------------------------------------------


async def get_user_management_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> UserManagementService:
    return UserManagementService(
        user_repository=UserRepositorySQLAlchemy(session),
        role_repository=RoleRepositorySQLAlchemy(session),
        password_service=password_service,
    )


UserService = Annotated[UserManagementService, Depends(get_user_management_service)]


async def get_role_management_service(session: DBSession) -> RoleManagementService:
    return RoleManagementService(
        role_repository=RoleRepositorySQLAlchemy(session),
        permission_repository=PermissionRepositorySQLAlchemy(session),
    )


RoleService = Annotated[RoleManagementService, Depends(get_role_management_service)]


async def get_permission_management_service(
    session: DBSession,
) -> PermissionManagementService:
    return PermissionManagementService(
        permission_repository=PermissionRepositorySQLAlchemy(session),
    )


PermissionService = Annotated[
    PermissionManagementService,
    Depends(get_permission_management_service),
]


# -----------------------------------------------------------------------------
# External Collaborators
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_media_storage() -> MediaStorage | None:
    """Get the shared media storage client, or None when not configured."""
    settings = get_settings()
    if not settings.media_enabled:
        return None
    return CloudinaryMediaStorage(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret.get_secret_value(),
    )


def require_media_storage(
    storage: MediaStorage | None = Depends(get_media_storage),
) -> MediaStorage:
    if storage is None:
        raise MediaDisabledError
    return storage


MediaStorageDep = Annotated[MediaStorage, Depends(require_media_storage)]


@lru_cache(maxsize=1)
def get_cache_service() -> RedisCacheService | None:
    """Get the shared Redis cache client, or None when REDIS_URL is unset."""
    settings = get_settings()
    if not settings.cache_enabled:
        return None
    return RedisCacheService(
        url=settings.redis_url,
        key_prefix=settings.redis_key_prefix,
        default_ttl=settings.redis_default_ttl,
    )


def get_health_checker() -> HealthChecker:
    return HealthChecker(engine=get_engine(), cache=get_cache_service())
