"""SQLAlchemy ORM model definitions."""

from datetime import datetime

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Date,
    Float,
    Integer,
    ForeignKey,
)
from sqlalchemy.orm import relationship

from portfolio_tracker.repositories.sqlalchemy.database import Base


class UserORM(Base):
    """SQLAlchemy model for User."""

    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(320), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    assets = relationship("AssetORM", back_populates="owner", cascade="all, delete-orphan")


class AssetORM(Base):
    """SQLAlchemy model for Asset (one holding of one user)."""

    __tablename__ = "assets"

    # Autoincrement key preserves insertion order for listing
    seq = Column(Integer, primary_key=True, autoincrement=True)
    asset_id = Column(String(36), unique=True, nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    symbol = Column(String(20), nullable=False)
    asset_type = Column(String(50), nullable=False)
    quantity = Column(Float, nullable=False, default=0.0)
    purchase_price = Column(Float, nullable=False, default=0.0)
    purchase_date = Column(Date, nullable=True)
    current_price = Column(Float, nullable=False, default=0.0)
    logo_url = Column(String(1024), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=True, onupdate=datetime.utcnow)

    owner = relationship("UserORM", back_populates="assets")
