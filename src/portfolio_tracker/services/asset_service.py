"""Asset service: owner-scoped CRUD over holdings."""

import uuid
from dataclasses import dataclass
from datetime import date
from typing import Optional

from portfolio_tracker.core.exceptions import NotFoundError, ValidationError
from portfolio_tracker.core.timezone import now_utc
from portfolio_tracker.domain.models import Asset
from portfolio_tracker.repositories.protocols import AssetRepository


@dataclass
class AssetInput:
    """Input data for creating or replacing an asset."""

    name: str
    symbol: str
    type: str
    quantity: float
    purchase_price: float
    current_price: float
    purchase_date: Optional[date] = None
    logo_url: Optional[str] = None


class AssetService:
    """
    Service for managing a user's holdings.

    Every operation is scoped to the owner; another user's asset behaves as
    if it did not exist.
    """

    def __init__(self, asset_repo: AssetRepository):
        self._asset_repo = asset_repo

    def list_assets(self, owner_id: str) -> list[Asset]:
        """List an owner's assets in insertion order."""
        return self._asset_repo.list_for_owner(owner_id)

    def get_asset(self, owner_id: str, asset_id: str) -> Asset:
        """Get one of the owner's assets."""
        asset = self._asset_repo.get_for_owner(asset_id, owner_id)
        if asset is None:
            raise NotFoundError("Asset", asset_id)
        return asset

    def add_asset(self, owner_id: str, data: AssetInput) -> Asset:
        """Create a new asset for the owner."""
        self._validate(data)
        asset = Asset(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            created_at=now_utc(),
            **self._fields(data),
        )
        return self._asset_repo.create(asset)

    def update_asset(self, owner_id: str, asset_id: str, data: AssetInput) -> Asset:
        """Replace the editable fields of one of the owner's assets."""
        existing = self.get_asset(owner_id, asset_id)
        self._validate(data)
        updated = Asset(
            id=existing.id,
            owner_id=existing.owner_id,
            created_at=existing.created_at,
            **self._fields(data),
        )
        return self._asset_repo.update(updated)

    def delete_asset(self, owner_id: str, asset_id: str) -> None:
        """Delete one of the owner's assets."""
        self.get_asset(owner_id, asset_id)
        self._asset_repo.delete(asset_id)

    @staticmethod
    def _fields(data: AssetInput) -> dict:
        return {
            "name": data.name.strip(),
            "symbol": data.symbol.strip().upper(),
            "type": data.type.strip().lower(),
            "quantity": data.quantity,
            "purchase_price": data.purchase_price,
            "current_price": data.current_price,
            "purchase_date": data.purchase_date,
            "logo_url": data.logo_url,
        }

    @staticmethod
    def _validate(data: AssetInput) -> None:
        if not data.name.strip():
            raise ValidationError("Asset name is required")
        if not data.symbol.strip():
            raise ValidationError("Symbol is required")
        if not data.type.strip():
            raise ValidationError("Asset type is required")
        if data.quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        if data.purchase_price < 0 or data.current_price < 0:
            raise ValidationError("Prices cannot be negative")
