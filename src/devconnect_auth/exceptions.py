"""Authentication exceptions.

These exceptions are raised by the devconnect_auth package and should be
caught and translated by the application layer (AuthenticationService).
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class TokenError(AuthError):
    """Base exception for session token verification failures."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidTokenError(TokenError):
    """Raised when a token is malformed or its signature does not match."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenExpiredError(TokenError):
    """Raised when a correctly signed token is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class TokenSigningError(AuthError):
    """Raised when a session token cannot be signed."""

    def __init__(self, message: str = "Token signing failed"):
        super().__init__(message)


class PasswordHashingError(AuthError):
    """Raised when bcrypt fails to produce a hash."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message)
