"""Shared domain primitives: exceptions, pagination and time helpers."""

from aegis_identity.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)
from aegis_identity.domain.shared.pagination import Page, PageRequest
from aegis_identity.domain.shared.time import utc_now

__all__ = [
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ForbiddenError",
    "Page",
    "PageRequest",
    "ValidationError",
    "utc_now",
]
