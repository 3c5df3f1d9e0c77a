"""Core utilities and shared functionality."""

from portfolio_tracker.core.timezone import (
    now_utc,
    to_utc,
    parse_date,
    UTC,
)
from portfolio_tracker.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    TokenExpiredError,
    NetworkOrServerError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "parse_date",
    "UTC",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "TokenExpiredError",
    "NetworkOrServerError",
]
