from aegis.presentation.api.routers.auth import router as auth_router
from aegis.presentation.api.routers.media import router as media_router
from aegis.presentation.api.routers.permissions import router as permissions_router
from aegis.presentation.api.routers.roles import router as roles_router
from aegis.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "media_router",
    "permissions_router",
    "roles_router",
    "users_router",
]
