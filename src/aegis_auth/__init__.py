"""Aegis Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the identity domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification (identity + authorization claims)

Architecture:
    aegis_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from aegis_auth import PasswordHashingService, JWTService
"""

from aegis_auth.exceptions import (
    AccountDeactivatedError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from aegis_auth.schemas import TokenPayload
from aegis_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
    "AccountDeactivatedError",
]
