"""Authentication service for login, registration and password change."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from aegis_auth import (
    AccountDeactivatedError,
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
)
from aegis_identity.application.context import Principal
from aegis_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from aegis_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    user: User
    principal: Principal
    access_token: str
    expires_in: int


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates aegis_auth infrastructure (password hashing, JWT tokens)
    with the User aggregate to provide:
    - Login with password
    - Registration
    - Session re-validation for bearer tokens
    - Password change
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def login(self, email: str, password: str) -> LoginResult:
        try:
            normalized = Email(email)
        except InvalidEmailError as e:
            raise InvalidCredentialsError from e

        user = await self._user_repo.find_by_email(normalized)
        if user is None:
            logger.debug("Login attempt for unknown email")
            raise InvalidCredentialsError

        if not user.is_active:
            logger.info("Login rejected for deactivated user: %s", user.id)
            raise AccountDeactivatedError

        if not self._password_service.verify(password, user.password_hash):
            raise InvalidCredentialsError

        principal = Principal.from_user(user)
        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            roles=user.role_names,
            permissions=user.permission_names,
        )

        logger.info("User logged in: %s", user.email)
        return LoginResult(
            user=user,
            principal=principal,
            access_token=access_token,
            expires_in=self._jwt_service.access_token_expire_seconds,
        )

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> User:
        normalized = Email(email)
        if await self._user_repo.exists_by_email(normalized):
            raise EmailAlreadyExistsError(normalized.value)

        password_hash = self._password_service.hash(password)
        user = User.create(
            email=normalized,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )
        await self._user_repo.save(user)

        logger.info("User registered: %s", user.email)
        return user

    async def validate_session(self, user_id: UUID) -> User | None:
        """Return the user behind a token subject, or None if missing/inactive."""
        user = await self._user_repo.find_by_id(user_id)
        if user is None or not user.is_active:
            logger.debug("Session rejected for user: %s", user_id)
            return None
        return user

    async def change_password(
        self,
        user_id: UUID,
        old_password: str,
        new_password: str,
    ) -> bool:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        if not self._password_service.verify(old_password, user.password_hash):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        user.change_password_hash(self._password_service.hash(new_password))
        await self._user_repo.save(user)

        logger.info("Password changed for user: %s", user_id)
        return True
