"""Authentication schemas for request/response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from aegis.presentation.api.schemas.users import UserResponse


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="Password (6-72 bytes)")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
                "first_name": "Ada",
                "last_name": "Lovelace",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login.

    The email is a plain string so malformed input is reported as invalid
    credentials rather than a validation error.
    """

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "admin@example.com",
                "password": "admin123",
            },
        },
    )


class ChangePasswordRequest(BaseModel):
    """Request schema for changing the caller's password."""

    old_password: str
    new_password: str


class AuthResponse(BaseModel):
    """Response for a successful login."""

    user: UserResponse
    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int


class PrincipalResponse(BaseModel):
    """Claims of the authenticated caller, as carried by the token."""

    id: UUID
    email: str
    roles: list[str]
    permissions: list[str]
