"""Service layer - business logic orchestration."""

from portfolio_tracker.services.auth_service import AuthService
from portfolio_tracker.services.asset_service import AssetService, AssetInput
from portfolio_tracker.services.session_store import SessionStore
from portfolio_tracker.services.portfolio_cache import PortfolioCache
from portfolio_tracker.services.portfolio_metrics import (
    compute_portfolio_stats,
    compute_allocation,
)

__all__ = [
    "AuthService",
    "AssetService",
    "AssetInput",
    "SessionStore",
    "PortfolioCache",
    "compute_portfolio_stats",
    "compute_allocation",
]
