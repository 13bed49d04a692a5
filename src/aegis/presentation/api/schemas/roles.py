"""Role schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from aegis.presentation.api.schemas.permissions import PermissionResponse


class RoleCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["editor"])
    description: str | None = Field(default=None, max_length=255)
    permission_ids: list[UUID] = Field(
        default_factory=list,
        description="Permissions granted on creation; unknown ids are ignored",
    )


class RoleUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=255)
    is_active: bool | None = None


class RolePermissionRequest(BaseModel):
    permission_id: UUID


class RoleSummary(BaseModel):
    """Compact role representation embedded in user responses."""

    id: UUID
    name: str
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class RoleResponse(BaseModel):
    id: UUID
    name: str
    description: str | None
    is_active: bool
    permissions: list[PermissionResponse]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RoleListResponse(BaseModel):
    items: list[RoleResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class RolePermissionsResponse(BaseModel):
    role_id: UUID
    permissions: list[str]
