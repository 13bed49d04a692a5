"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from aegis import __version__
from aegis.infrastructure.persistence.init_db import create_tables, run_bootstrap
from aegis.infrastructure.system import HealthChecker
from aegis.presentation.api.dependencies import (
    get_cache_service,
    get_engine,
    get_health_checker,
    get_media_storage,
    get_session_maker,
)
from aegis.presentation.api.exception_handlers import setup_exception_handlers
from aegis.presentation.api.middleware import (
    CorrelationIdFilter,
    CorrelationIdMiddleware,
)
from aegis.presentation.api.routers import (
    auth_router,
    media_router,
    permissions_router,
    roles_router,
    users_router,
)
from aegis.presentation.api.schemas.common import HealthResponse
from aegis_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the aegis packages with:
    - Console output with timestamps, correlation ids and module names
    - Configurable log level for aegis modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = (
        "%(asctime)s | %(levelname)-8s | %(correlation_id)s | %(name)s | %(message)s"
    )
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(CorrelationIdFilter())

    for name in ("aegis", "aegis_auth", "aegis_identity", "aegis_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login, registration and password management.

**Tokens:**
- Login returns a bearer token carrying the user's role and permission names
- Role or permission changes apply from the next login
- Deactivated accounts are rejected on every request
""",
    },
    {
        "name": "Users",
        "description": "User administration and role assignment.",
    },
    {
        "name": "Roles",
        "description": "Role administration and permission grants (admin only).",
    },
    {
        "name": "Permissions",
        "description": "Permission catalogue administration (admin only).",
    },
    {
        "name": "Media",
        "description": """Image uploads to the configured media storage.

**Limits:**
- `image/png`, `image/jpg`, `image/jpeg` only
- Size and file count limits come from settings
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    logger.info("Starting Aegis API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    if settings.bootstrap_on_startup:
        report = await run_bootstrap(get_session_maker(), settings)
        logger.info(
            "Bootstrap seeding finished (changed=%s)",
            report.changed,
        )
    yield

    logger.info("Shutting down Aegis API...")
    media_storage = get_media_storage()
    if media_storage is not None:
        await media_storage.close()
    cache = get_cache_service()
    if cache is not None:
        await cache.close()
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    v1_router.include_router(roles_router, prefix="/roles", tags=["Roles"])
    v1_router.include_router(
        permissions_router,
        prefix="/permissions",
        tags=["Permissions"],
    )
    v1_router.include_router(media_router, prefix="/media", tags=["Media"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "**Role-based access control** backend: authentication, "
            "users, roles and permissions."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get(
        "/health",
        tags=["Health"],
        response_model=HealthResponse,
        responses={503: {"model": HealthResponse}},
    )
    async def health_check(
        checker: HealthChecker = Depends(get_health_checker),
    ) -> JSONResponse:
        """Ping the database (and Redis when configured)."""
        report = await checker.check()
        body = HealthResponse(
            status=report.status,
            info=report.info,
            error=report.error,
        )
        return JSONResponse(
            status_code=(
                status.HTTP_200_OK
                if report.healthy
                else status.HTTP_503_SERVICE_UNAVAILABLE
            ),
            content=body.model_dump(),
        )

    return app


# Application instance for uvicorn
app = create_app()
