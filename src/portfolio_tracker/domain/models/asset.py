"""Asset (holding) domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from portfolio_tracker.core.timezone import parse_date


@dataclass
class Asset:
    """
    One portfolio holding.

    Quantities and prices are plain floats: they travel as JSON numbers and
    the derived statistics are display values, not ledger amounts.
    """

    id: str
    name: str
    symbol: str
    type: str
    quantity: float
    purchase_price: float
    current_price: float
    purchase_date: Optional[date] = None
    logo_url: Optional[str] = None
    owner_id: Optional[str] = None
    created_at: Optional[datetime] = field(default=None, repr=False)

    @property
    def current_value(self) -> float:
        return self.current_price * self.quantity

    @property
    def invested_value(self) -> float:
        return self.purchase_price * self.quantity

    def to_api(self) -> dict[str, Any]:
        """Serialize to the asset-list wire shape."""
        return {
            "id": self.id,
            "name": self.name,
            "symbol": self.symbol,
            "type": self.type,
            "quantity": self.quantity,
            "purchasePrice": self.purchase_price,
            "purchaseDate": self.purchase_date.isoformat() if self.purchase_date else None,
            "currentPrice": self.current_price,
            "logoUrl": self.logo_url,
        }

    def to_upsert_payload(self) -> dict[str, Any]:
        """Serialize to the add/update request body (legacy field names)."""
        return {
            "assetName": self.name,
            "symbol": self.symbol,
            "assetType": self.type,
            "Quantity": self.quantity,
            "purchaseDate": self.purchase_date.isoformat() if self.purchase_date else None,
            "currentPrice": self.current_price,
            "purchasePrice": self.purchase_price,
            "logoUrl": self.logo_url,
        }

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Asset":
        """
        Build an Asset from an asset-list item.

        Raises KeyError/TypeError/ValueError on a malformed item.
        """
        return cls(
            id=str(data["id"]),
            name=data["name"],
            symbol=data["symbol"],
            type=data["type"],
            quantity=float(data["quantity"]),
            purchase_price=float(data["purchasePrice"]),
            current_price=float(data["currentPrice"]),
            purchase_date=parse_date(data.get("purchaseDate")),
            logo_url=data.get("logoUrl"),
        )
