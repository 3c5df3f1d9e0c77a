"""Repository layer - data access abstractions and implementations."""

from portfolio_tracker.repositories.protocols import (
    UserRepository,
    AssetRepository,
    ClientStorage,
)

__all__ = [
    "UserRepository",
    "AssetRepository",
    "ClientStorage",
]
