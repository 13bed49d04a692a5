"""User administration schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from aegis.presentation.api.schemas.roles import RoleSummary


class UserCreateRequest(BaseModel):
    """Request schema for creating a user as an administrator."""

    email: EmailStr
    password: str
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role_ids: list[UUID] = Field(default_factory=list)


class UserUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    is_active: bool | None = None
    is_email_verified: bool | None = None


class UserRoleRequest(BaseModel):
    role_id: UUID


class UserResponse(BaseModel):
    """Response schema for user data.

    Never exposes the password hash.
    """

    id: UUID
    email: str
    first_name: str
    last_name: str
    is_active: bool
    is_email_verified: bool
    roles: list[RoleSummary]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    items: list[UserResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class UserPermissionsResponse(BaseModel):
    user_id: UUID
    permissions: list[str]
