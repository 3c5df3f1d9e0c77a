"""Repository protocol definitions (interfaces)."""

from portfolio_tracker.repositories.protocols.user_repo import UserRepository
from portfolio_tracker.repositories.protocols.asset_repo import AssetRepository
from portfolio_tracker.repositories.protocols.client_storage import ClientStorage

__all__ = [
    "UserRepository",
    "AssetRepository",
    "ClientStorage",
]
