"""Permission administration router (admin only)."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from aegis.presentation.api.dependencies import (
    AdminPrincipal,
    DBSession,
    PermissionService,
)
from aegis.presentation.api.schemas.permissions import (
    PermissionCreateRequest,
    PermissionResponse,
    PermissionUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a permission",
    responses={409: {"description": "Permission name already exists"}},
)
async def create_permission(
    request: PermissionCreateRequest,
    admin: AdminPrincipal,
    permissions: PermissionService,
    session: DBSession,
) -> PermissionResponse:
    permission = await permissions.create_permission(
        name=request.name,
        description=request.description,
    )
    await session.commit()
    logger.info("Admin %s created permission: %s", admin.email, permission.name)
    return PermissionResponse.model_validate(permission)


@router.get("", summary="List permissions")
async def list_permissions(
    _admin: AdminPrincipal,
    permissions: PermissionService,
) -> list[PermissionResponse]:
    return [
        PermissionResponse.model_validate(p)
        for p in await permissions.list_permissions()
    ]


@router.get("/{permission_id}", summary="Get a permission")
async def get_permission(
    permission_id: UUID,
    _admin: AdminPrincipal,
    permissions: PermissionService,
) -> PermissionResponse:
    return PermissionResponse.model_validate(
        await permissions.get_permission(permission_id),
    )


@router.put(
    "/{permission_id}",
    summary="Update a permission",
    responses={409: {"description": "Permission name already exists"}},
)
async def update_permission(
    permission_id: UUID,
    request: PermissionUpdateRequest,
    _admin: AdminPrincipal,
    permissions: PermissionService,
    session: DBSession,
) -> PermissionResponse:
    permission = await permissions.update_permission(
        permission_id,
        name=request.name,
        description=request.description,
        is_active=request.is_active,
    )
    await session.commit()
    return PermissionResponse.model_validate(permission)


@router.delete(
    "/{permission_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a permission",
)
async def delete_permission(
    permission_id: UUID,
    admin: AdminPrincipal,
    permissions: PermissionService,
    session: DBSession,
) -> None:
    await permissions.delete_permission(permission_id)
    await session.commit()
    logger.info("Admin %s deleted permission: %s", admin.email, permission_id)


@router.put("/{permission_id}/activate", summary="Activate a permission")
async def activate_permission(
    permission_id: UUID,
    _admin: AdminPrincipal,
    permissions: PermissionService,
    session: DBSession,
) -> PermissionResponse:
    permission = await permissions.activate_permission(permission_id)
    await session.commit()
    return PermissionResponse.model_validate(permission)


@router.put("/{permission_id}/deactivate", summary="Deactivate a permission")
async def deactivate_permission(
    permission_id: UUID,
    _admin: AdminPrincipal,
    permissions: PermissionService,
    session: DBSession,
) -> PermissionResponse:
    permission = await permissions.deactivate_permission(permission_id)
    await session.commit()
    return PermissionResponse.model_validate(permission)
