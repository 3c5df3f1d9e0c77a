"""SQLAlchemy repository implementations."""

from portfolio_tracker.repositories.sqlalchemy.database import (
    Base,
    get_db,
    get_engine,
    get_session_factory,
    init_db,
    reset_database,
    session_scope,
)
from portfolio_tracker.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository
from portfolio_tracker.repositories.sqlalchemy.asset_repo import SqlAlchemyAssetRepository

__all__ = [
    "Base",
    "get_db",
    "get_engine",
    "get_session_factory",
    "init_db",
    "reset_database",
    "session_scope",
    "SqlAlchemyUserRepository",
    "SqlAlchemyAssetRepository",
]
