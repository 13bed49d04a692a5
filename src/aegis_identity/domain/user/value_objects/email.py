"""Email value object."""

import re
from dataclasses import dataclass

from aegis_identity.domain.user.exceptions import InvalidEmailError

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_MAX_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """Normalized (trimmed, lower-cased) email address."""

    value: str

    def __post_init__(self):
        normalized = (self.value or "").strip().lower()
        if not normalized:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)
        if len(normalized) > _MAX_LENGTH:
            msg = f"Email cannot exceed {_MAX_LENGTH} characters"
            raise InvalidEmailError(msg)
        if not _EMAIL_PATTERN.match(normalized):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)
        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    def __str__(self) -> str:
        return self.value
