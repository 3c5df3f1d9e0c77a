"""Pydantic schemas for API request/response."""

from portfolio_tracker.api.schemas.user import (
    SignupRequest,
    LoginRequest,
    TokenResponse,
)
from portfolio_tracker.api.schemas.asset import (
    AssetUpsertRequest,
    AssetResponse,
    AssetListResponse,
    AssetEnvelope,
    StatusResponse,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "AssetUpsertRequest",
    "AssetResponse",
    "AssetListResponse",
    "AssetEnvelope",
    "StatusResponse",
]
