"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address
    exp
        Token expiration timestamp
    roles
        Role names granted to the user when the token was issued
    permissions
        Flattened, de-duplicated permission names across those roles
    """

    user_id: UUID
    email: str
    exp: datetime
    roles: tuple[str, ...] = field(default_factory=tuple)
    permissions: tuple[str, ...] = field(default_factory=tuple)
