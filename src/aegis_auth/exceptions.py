"""Authentication exceptions.

These exceptions are raised by the aegis_auth package and by the
AuthenticationService, and are mapped to HTTP responses by the API layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The message never reveals which of the two was wrong.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class AccountDeactivatedError(AuthError):
    """Raised when a deactivated account tries to authenticate."""

    def __init__(self, message: str = "User account is deactivated"):
        super().__init__(message)
