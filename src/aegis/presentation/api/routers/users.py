"""User administration router."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from aegis.presentation.api.dependencies import (
    AdminPrincipal,
    CurrentPrincipal,
    DBSession,
    UserService,
    require_permissions,
)
from aegis.presentation.api.schemas.users import (
    UserCreateRequest,
    UserListResponse,
    UserPermissionsResponse,
    UserResponse,
    UserRoleRequest,
    UserUpdateRequest,
)
from aegis_identity.application.context import Principal
from aegis_identity.domain.shared import PageRequest
from aegis_identity.domain.shared.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

router = APIRouter()

UsersReader = Annotated[Principal, require_permissions("users:read")]
UsersUpdater = Annotated[Principal, require_permissions("users:update")]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created"},
        403: {"description": "Admin role required"},
        404: {"description": "Unknown role id"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(
    request: UserCreateRequest,
    admin: AdminPrincipal,
    users: UserService,
    session: DBSession,
) -> UserResponse:
    user = await users.create_user(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        role_ids=request.role_ids,
    )
    await session.commit()
    logger.info("Admin %s created user: %s", admin.email, user.email)
    return UserResponse.model_validate(user)


@router.get("", summary="List users")
async def list_users(  # NOQA: PLR0913
    _reader: UsersReader,
    users: UserService,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: str | None = Query(default=None, description="Email or name contains"),
    is_active: bool | None = Query(default=None),
) -> UserListResponse:
    result = await users.list_users(
        PageRequest(page=page, limit=limit, search=search, is_active=is_active),
    )
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
    )


@router.get("/me", summary="Get the current user's profile")
async def get_me(principal: CurrentPrincipal, users: UserService) -> UserResponse:
    return UserResponse.model_validate(await users.get_user(principal.user_id))


@router.get("/{user_id}", summary="Get a user")
async def get_user(
    user_id: UUID,
    _reader: UsersReader,
    users: UserService,
) -> UserResponse:
    return UserResponse.model_validate(await users.get_user(user_id))


@router.put(
    "/{user_id}",
    summary="Update a user",
    responses={409: {"description": "Email already registered"}},
)
async def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    _updater: UsersUpdater,
    users: UserService,
    session: DBSession,
) -> UserResponse:
    user = await users.update_user(
        user_id,
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
        is_active=request.is_active,
        is_email_verified=request.is_email_verified,
    )
    await session.commit()
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
async def delete_user(
    user_id: UUID,
    admin: AdminPrincipal,
    users: UserService,
    session: DBSession,
) -> None:
    await users.delete_user(user_id)
    await session.commit()
    logger.info("Admin %s deleted user: %s", admin.email, user_id)


@router.post(
    "/{user_id}/roles",
    summary="Assign a role to a user",
    responses={
        404: {"description": "User or role not found"},
        409: {"description": "Role already assigned"},
    },
)
async def assign_role(
    user_id: UUID,
    request: UserRoleRequest,
    _admin: AdminPrincipal,
    users: UserService,
    session: DBSession,
) -> UserResponse:
    user = await users.assign_role(user_id, request.role_id)
    await session.commit()
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}/roles/{role_id}",
    summary="Remove a role from a user",
    responses={
        404: {"description": "User or role not found"},
        422: {"description": "Role not assigned"},
    },
)
async def remove_role(
    user_id: UUID,
    role_id: UUID,
    _admin: AdminPrincipal,
    users: UserService,
    session: DBSession,
) -> UserResponse:
    user = await users.remove_role(user_id, role_id)
    await session.commit()
    return UserResponse.model_validate(user)


@router.put("/{user_id}/activate", summary="Activate a user")
async def activate_user(
    user_id: UUID,
    _admin: AdminPrincipal,
    users: UserService,
    session: DBSession,
) -> UserResponse:
    user = await users.activate_user(user_id)
    await session.commit()
    return UserResponse.model_validate(user)


@router.put("/{user_id}/deactivate", summary="Deactivate a user")
async def deactivate_user(
    user_id: UUID,
    _admin: AdminPrincipal,
    users: UserService,
    session: DBSession,
) -> UserResponse:
    user = await users.deactivate_user(user_id)
    await session.commit()
    return UserResponse.model_validate(user)


@router.put("/{user_id}/verify-email", summary="Mark a user's email as verified")
async def verify_email(
    user_id: UUID,
    _admin: AdminPrincipal,
    users: UserService,
    session: DBSession,
) -> UserResponse:
    user = await users.verify_email(user_id)
    await session.commit()
    return UserResponse.model_validate(user)


@router.get("/{user_id}/permissions", summary="List a user's effective permissions")
async def get_user_permissions(
    user_id: UUID,
    _reader: UsersReader,
    users: UserService,
) -> UserPermissionsResponse:
    """Empty for unknown or deactivated users."""
    return UserPermissionsResponse(
        user_id=user_id,
        permissions=await users.get_permissions(user_id),
    )
