"""Pydantic schemas for asset endpoints."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from portfolio_tracker.core.timezone import parse_date
from portfolio_tracker.domain.models import Asset
from portfolio_tracker.services.asset_service import AssetInput


class AssetUpsertRequest(BaseModel):
    """
    Request schema for adding or updating an asset.

    Field aliases keep the wire names older clients already send.
    """

    model_config = ConfigDict(populate_by_name=True)

    asset_name: str = Field(..., alias="assetName", min_length=1, max_length=255)
    symbol: str = Field(..., min_length=1, max_length=20)
    asset_type: str = Field(..., alias="assetType", min_length=1, max_length=50)
    quantity: float = Field(..., alias="Quantity", ge=0)
    purchase_price: float = Field(..., alias="purchasePrice", ge=0)
    current_price: float = Field(..., alias="currentPrice", ge=0)
    purchase_date: Optional[date] = Field(default=None, alias="purchaseDate")
    logo_url: Optional[str] = Field(default=None, alias="logoUrl", max_length=1024)

    @field_validator("purchase_date", mode="before")
    @classmethod
    def _lenient_date(cls, value: Any) -> Optional[date]:
        try:
            return parse_date(value)
        except (ValueError, OverflowError, TypeError) as e:
            raise ValueError(f"Invalid purchase date: {value!r}") from e

    def to_input(self) -> AssetInput:
        return AssetInput(
            name=self.asset_name,
            symbol=self.symbol,
            type=self.asset_type,
            quantity=self.quantity,
            purchase_price=self.purchase_price,
            current_price=self.current_price,
            purchase_date=self.purchase_date,
            logo_url=self.logo_url,
        )


class AssetResponse(BaseModel):
    """Response schema for a single asset (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    symbol: str
    type: str
    quantity: float
    purchase_price: float
    purchase_date: Optional[date] = None
    current_price: float
    logo_url: Optional[str] = None

    @classmethod
    def from_domain(cls, asset: Asset) -> "AssetResponse":
        return cls(
            id=asset.id,
            name=asset.name,
            symbol=asset.symbol,
            type=asset.type,
            quantity=asset.quantity,
            purchase_price=asset.purchase_price,
            purchase_date=asset.purchase_date,
            current_price=asset.current_price,
            logo_url=asset.logo_url,
        )


class AssetListResponse(BaseModel):
    """Response schema for listing the caller's assets."""

    status: bool = True
    data: list[AssetResponse]


class AssetEnvelope(BaseModel):
    """Response schema for a mutated asset."""

    status: bool = True
    message: str
    data: AssetResponse


class StatusResponse(BaseModel):
    """Bare status/message envelope."""

    status: bool = True
    message: str
