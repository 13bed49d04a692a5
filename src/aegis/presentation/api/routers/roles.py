"""Role administration router (admin only)."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query, status

from aegis.presentation.api.dependencies import AdminPrincipal, DBSession, RoleService
from aegis.presentation.api.schemas.roles import (
    RoleCreateRequest,
    RoleListResponse,
    RolePermissionRequest,
    RolePermissionsResponse,
    RoleResponse,
    RoleUpdateRequest,
)
from aegis_identity.domain.shared import PageRequest
from aegis_identity.domain.shared.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a role",
    responses={409: {"description": "Role name already exists"}},
)
async def create_role(
    request: RoleCreateRequest,
    admin: AdminPrincipal,
    roles: RoleService,
    session: DBSession,
) -> RoleResponse:
    role = await roles.create_role(
        name=request.name,
        description=request.description,
        permission_ids=request.permission_ids,
    )
    await session.commit()
    logger.info("Admin %s created role: %s", admin.email, role.name)
    return RoleResponse.model_validate(role)


@router.get("", summary="List roles")
async def list_roles(  # NOQA: PLR0913
    _admin: AdminPrincipal,
    roles: RoleService,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: str | None = Query(default=None, description="Name contains"),
    is_active: bool | None = Query(default=None),
) -> RoleListResponse:
    result = await roles.list_roles(
        PageRequest(page=page, limit=limit, search=search, is_active=is_active),
    )
    return RoleListResponse(
        items=[RoleResponse.model_validate(r) for r in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
    )


@router.get("/{role_id}", summary="Get a role")
async def get_role(
    role_id: UUID,
    _admin: AdminPrincipal,
    roles: RoleService,
) -> RoleResponse:
    return RoleResponse.model_validate(await roles.get_role(role_id))


@router.put(
    "/{role_id}",
    summary="Update a role",
    responses={409: {"description": "Role name already exists"}},
)
async def update_role(
    role_id: UUID,
    request: RoleUpdateRequest,
    _admin: AdminPrincipal,
    roles: RoleService,
    session: DBSession,
) -> RoleResponse:
    role = await roles.update_role(
        role_id,
        name=request.name,
        description=request.description,
        is_active=request.is_active,
    )
    await session.commit()
    return RoleResponse.model_validate(role)


@router.delete(
    "/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a role",
)
async def delete_role(
    role_id: UUID,
    admin: AdminPrincipal,
    roles: RoleService,
    session: DBSession,
) -> None:
    await roles.delete_role(role_id)
    await session.commit()
    logger.info("Admin %s deleted role: %s", admin.email, role_id)


@router.post(
    "/{role_id}/permissions",
    summary="Grant a permission to a role",
    responses={
        404: {"description": "Role or permission not found"},
        409: {"description": "Permission already granted"},
    },
)
async def assign_permission(
    role_id: UUID,
    request: RolePermissionRequest,
    _admin: AdminPrincipal,
    roles: RoleService,
    session: DBSession,
) -> RoleResponse:
    role = await roles.assign_permission(role_id, request.permission_id)
    await session.commit()
    return RoleResponse.model_validate(role)


@router.delete(
    "/{role_id}/permissions/{permission_id}",
    summary="Revoke a permission from a role",
    responses={
        404: {"description": "Role or permission not found"},
        422: {"description": "Permission not granted"},
    },
)
async def remove_permission(
    role_id: UUID,
    permission_id: UUID,
    _admin: AdminPrincipal,
    roles: RoleService,
    session: DBSession,
) -> RoleResponse:
    role = await roles.remove_permission(role_id, permission_id)
    await session.commit()
    return RoleResponse.model_validate(role)


@router.put("/{role_id}/activate", summary="Activate a role")
async def activate_role(
    role_id: UUID,
    _admin: AdminPrincipal,
    roles: RoleService,
    session: DBSession,
) -> RoleResponse:
    role = await roles.activate_role(role_id)
    await session.commit()
    return RoleResponse.model_validate(role)


@router.put("/{role_id}/deactivate", summary="Deactivate a role")
async def deactivate_role(
    role_id: UUID,
    _admin: AdminPrincipal,
    roles: RoleService,
    session: DBSession,
) -> RoleResponse:
    role = await roles.deactivate_role(role_id)
    await session.commit()
    return RoleResponse.model_validate(role)


@router.get("/{role_id}/permissions", summary="List a role's permission names")
async def get_role_permissions(
    role_id: UUID,
    _admin: AdminPrincipal,
    roles: RoleService,
) -> RolePermissionsResponse:
    """Empty for unknown or deactivated roles."""
    return RolePermissionsResponse(
        role_id=role_id,
        permissions=await roles.get_role_permissions(role_id),
    )
