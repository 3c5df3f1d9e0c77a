"""Asset repository protocol."""

from typing import Protocol, Optional

from portfolio_tracker.domain.models import Asset


class AssetRepository(Protocol):
    """Interface for asset data access. All reads are owner-scoped."""

    def create(self, asset: Asset) -> Asset:
        """Persist a new asset."""
        ...

    def get_for_owner(self, asset_id: str, owner_id: str) -> Optional[Asset]:
        """Retrieve an asset if it belongs to owner_id."""
        ...

    def list_for_owner(self, owner_id: str) -> list[Asset]:
        """List an owner's assets in insertion order."""
        ...

    def update(self, asset: Asset) -> Asset:
        """Update an existing asset."""
        ...

    def delete(self, asset_id: str) -> None:
        """Delete an asset (hard delete)."""
        ...
