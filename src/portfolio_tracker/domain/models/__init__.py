"""Domain models package."""

from portfolio_tracker.domain.models.user import User, UserIdentity
from portfolio_tracker.domain.models.session import Session
from portfolio_tracker.domain.models.asset import Asset

__all__ = [
    "User",
    "UserIdentity",
    "Session",
    "Asset",
]
