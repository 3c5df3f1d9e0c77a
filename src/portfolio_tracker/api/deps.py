"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from portfolio_tracker.config.settings import get_settings
from portfolio_tracker.core.exceptions import AuthenticationError
from portfolio_tracker.domain.models import UserIdentity
from portfolio_tracker.repositories.sqlalchemy.database import get_db
from portfolio_tracker.repositories.sqlalchemy import (
    SqlAlchemyUserRepository,
    SqlAlchemyAssetRepository,
)
from portfolio_tracker.services import AuthService, AssetService

bearer_scheme = HTTPBearer(auto_error=False)


def get_user_repo(db: Session = Depends(get_db)) -> SqlAlchemyUserRepository:
    """Provide UserRepository instance."""
    return SqlAlchemyUserRepository(db)


def get_asset_repo(db: Session = Depends(get_db)) -> SqlAlchemyAssetRepository:
    """Provide AssetRepository instance."""
    return SqlAlchemyAssetRepository(db)


def get_auth_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
) -> AuthService:
    """Provide AuthService instance."""
    settings = get_settings()
    return AuthService(
        user_repo=user_repo,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        token_ttl_minutes=settings.access_token_ttl_minutes,
    )


def get_asset_service(
    asset_repo: SqlAlchemyAssetRepository = Depends(get_asset_repo),
) -> AssetService:
    """Provide AssetService instance."""
    return AssetService(asset_repo=asset_repo)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Extract the bearer token, failing with 401 when absent."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing bearer token")
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserIdentity:
    """Resolve the caller's identity from a verified token."""
    return auth_service.verify_token(token)
