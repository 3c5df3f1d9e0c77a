"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class AuthenticationError(AppError):
    """Raised on bad credentials or a missing/invalid token."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTHENTICATION_ERROR")


class TokenExpiredError(AppError):
    """Raised when a bearer token is past its expiry."""

    def __init__(self, message: str = "Session expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class NetworkOrServerError(AppError):
    """
    Raised when the backend cannot be reached or answers with a failure.

    status_code is the HTTP status when a response was received, None for
    transport failures.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, code="NETWORK_ERROR")
