"""API routers package."""

from portfolio_tracker.api.routers.auth import router as auth_router
from portfolio_tracker.api.routers.assets import router as assets_router

__all__ = [
    "auth_router",
    "assets_router",
]
