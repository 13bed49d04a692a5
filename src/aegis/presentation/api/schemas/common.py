"""Common schemas shared across API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "User not found: 42", "code": "USER_NOT_FOUND"},
        },
    )


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="ok or error")
    info: dict[str, dict[str, Any]] = Field(default_factory=dict)
    error: dict[str, dict[str, Any]] = Field(default_factory=dict)
