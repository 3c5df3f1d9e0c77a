"""SQLAlchemy implementation of AssetRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio_tracker.domain.models import Asset
from portfolio_tracker.repositories.sqlalchemy.orm_models import AssetORM


class SqlAlchemyAssetRepository:
    """SQLAlchemy-backed asset repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, asset: Asset) -> Asset:
        """Persist a new asset."""
        orm_asset = AssetORM(
            asset_id=asset.id,
            user_id=asset.owner_id,
            created_at=asset.created_at,
        )
        self._apply(orm_asset, asset)
        self._db.add(orm_asset)
        self._db.commit()
        self._db.refresh(orm_asset)
        return self._to_domain(orm_asset)

    def get_for_owner(self, asset_id: str, owner_id: str) -> Optional[Asset]:
        """Retrieve an asset if it belongs to owner_id."""
        orm_asset = self._db.query(AssetORM).filter(
            AssetORM.asset_id == asset_id,
            AssetORM.user_id == owner_id,
        ).first()
        return self._to_domain(orm_asset) if orm_asset else None

    def list_for_owner(self, owner_id: str) -> list[Asset]:
        """List an owner's assets in insertion order."""
        orm_assets = (
            self._db.query(AssetORM)
            .filter(AssetORM.user_id == owner_id)
            .order_by(AssetORM.seq)
            .all()
        )
        return [self._to_domain(a) for a in orm_assets]

    def update(self, asset: Asset) -> Asset:
        """Update an existing asset."""
        orm_asset = self._db.query(AssetORM).filter(
            AssetORM.asset_id == asset.id
        ).first()
        if orm_asset:
            self._apply(orm_asset, asset)
            self._db.commit()
            self._db.refresh(orm_asset)
            return self._to_domain(orm_asset)
        raise ValueError(f"Asset not found: {asset.id}")

    def delete(self, asset_id: str) -> None:
        """Delete an asset."""
        self._db.query(AssetORM).filter(AssetORM.asset_id == asset_id).delete()
        self._db.commit()

    @staticmethod
    def _apply(orm: AssetORM, asset: Asset) -> None:
        """Copy mutable fields from the domain model onto the ORM row."""
        orm.name = asset.name
        orm.symbol = asset.symbol
        orm.asset_type = asset.type
        orm.quantity = asset.quantity
        orm.purchase_price = asset.purchase_price
        orm.purchase_date = asset.purchase_date
        orm.current_price = asset.current_price
        orm.logo_url = asset.logo_url

    @staticmethod
    def _to_domain(orm: AssetORM) -> Asset:
        """Convert ORM model to domain model."""
        return Asset(
            id=orm.asset_id,
            name=orm.name,
            symbol=orm.symbol,
            type=orm.asset_type,
            quantity=orm.quantity,
            purchase_price=orm.purchase_price,
            current_price=orm.current_price,
            purchase_date=orm.purchase_date,
            logo_url=orm.logo_url,
            owner_id=orm.user_id,
            created_at=orm.created_at,
        )
