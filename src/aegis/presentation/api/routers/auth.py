"""Authentication router for login, registration and password change."""

import logging

from fastapi import APIRouter, status

from aegis.presentation.api.dependencies import (
    AuthService,
    CurrentPrincipal,
    DBSession,
)
from aegis.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    PrincipalResponse,
    RegisterRequest,
)
from aegis.presentation.api.schemas.common import MessageResponse
from aegis.presentation.api.schemas.users import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    summary="Login with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid email or password"},
        403: {"description": "Account is deactivated"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
) -> AuthResponse:
    """
    Authenticate and obtain an access token.

    The token carries a snapshot of the user's role and permission names;
    changes to roles take effect on the next login.
    """
    result = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return AuthResponse(
        user=UserResponse.model_validate(result.user),
        access_token=result.access_token,
        expires_in=result.expires_in,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input (weak password)"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """
    Register a new account.

    New accounts are active, unverified and hold no roles.
    """
    user = await auth_service.register(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
    )
    await session.commit()
    return UserResponse.model_validate(user)


@router.post(
    "/change-password",
    summary="Change the current user's password",
    responses={
        200: {"description": "Password changed"},
        400: {"description": "New password too weak"},
        401: {"description": "Not authenticated or wrong current password"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    principal: CurrentPrincipal,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    await auth_service.change_password(
        user_id=principal.user_id,
        old_password=request.old_password,
        new_password=request.new_password,
    )
    await session.commit()
    return MessageResponse(message="Password changed successfully")


@router.get(
    "/me",
    summary="Get the current principal",
    responses={401: {"description": "Not authenticated"}},
)
async def me(principal: CurrentPrincipal) -> PrincipalResponse:
    """Return identity and claims exactly as carried by the bearer token."""
    return PrincipalResponse(
        id=principal.user_id,
        email=principal.email,
        roles=sorted(principal.roles),
        permissions=sorted(principal.permissions),
    )
