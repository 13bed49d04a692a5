"""JWT token service.

Issues and validates signed session tokens carrying the user's identity
and a snapshot of their authorization claims.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from aegis_auth.exceptions import InvalidTokenError
from aegis_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(
    ...     user_id, "user@example.com", roles=["admin"], permissions=["users:read"]
    ... )
    >>> payload = service.verify_token(token)
    >>> print(payload.permissions)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until access token expires (default 1)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_expire_seconds(self) -> int:
        return int(self._access_expire.total_seconds())

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        roles: Iterable[str] = (),
        permissions: Iterable[str] = (),
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        user_id
            The user's unique identifier (``sub`` claim)
        email
            The user's email address
        roles
            Role names to embed
        permissions
            Permission names to embed
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(user_id),
            "email": email,
            "roles": list(roles),
            "permissions": list(permissions),
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )

            user_id = UUID(payload["sub"])
            email = payload["email"]
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            roles = payload.get("roles", [])
            permissions = payload.get("permissions", [])
            if not isinstance(roles, list) or not isinstance(permissions, list):
                msg = "roles and permissions claims must be lists"
                raise ValueError(msg)

            return TokenPayload(
                user_id=user_id,
                email=email,
                exp=exp,
                roles=tuple(str(r) for r in roles),
                permissions=tuple(str(p) for p in permissions),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
