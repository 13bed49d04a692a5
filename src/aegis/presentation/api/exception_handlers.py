"""Centralized exception handlers for the FastAPI application.

Domain and authentication exceptions are mapped to HTTP responses with a
consistent error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from aegis.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from aegis_auth import (
    AccountDeactivatedError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from aegis_identity.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ROLE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PERMISSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_NAME: status.HTTP_409_CONFLICT,
    ErrorCode.ROLE_ALREADY_ASSIGNED: status.HTTP_409_CONFLICT,
    ErrorCode.PERMISSION_ALREADY_GRANTED: status.HTTP_409_CONFLICT,
    # 422 Unprocessable Entity - business rule violations
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.ROLE_NOT_ASSIGNED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.PERMISSION_NOT_GRANTED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    # 403 Forbidden - guard denial
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    # External services
    ErrorCode.MEDIA_UPLOAD_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.MEDIA_DISABLED: status.HTTP_503_SERVICE_UNAVAILABLE,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, BusinessRuleViolation):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, ForbiddenError):
        return status.HTTP_403_FORBIDDEN

    return status.HTTP_400_BAD_REQUEST


def _auth_error_response(exc: AuthError) -> tuple[int, ErrorCode, dict[str, str]]:
    bearer = {"WWW-Authenticate": "Bearer"}
    if isinstance(exc, InvalidCredentialsError):
        return status.HTTP_401_UNAUTHORIZED, ErrorCode.INVALID_CREDENTIALS, bearer
    if isinstance(exc, InvalidTokenError):
        return status.HTTP_401_UNAUTHORIZED, ErrorCode.INVALID_TOKEN, bearer
    if isinstance(exc, AccountDeactivatedError):
        return status.HTTP_403_FORBIDDEN, ErrorCode.ACCOUNT_DEACTIVATED, {}
    if isinstance(exc, WeakPasswordError):
        return status.HTTP_400_BAD_REQUEST, ErrorCode.WEAK_PASSWORD, {}
    return status.HTTP_401_UNAUTHORIZED, ErrorCode.INVALID_CREDENTIALS, bearer


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details while returning a safe message.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        status_code, code, headers = _auth_error_response(exc)

        logger.info(
            "Authentication error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=code.value,
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all handler for exceptions not handled above."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
