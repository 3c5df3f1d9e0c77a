"""Domain layer - pure business models with no external dependencies."""

from portfolio_tracker.domain.models import (
    User,
    UserIdentity,
    Session,
    Asset,
)

__all__ = [
    "User",
    "UserIdentity",
    "Session",
    "Asset",
]
