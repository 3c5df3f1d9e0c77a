"""Asset endpoints, all scoped to the authenticated user."""

from fastapi import APIRouter, Depends

from portfolio_tracker.api.deps import get_asset_service, get_current_user
from portfolio_tracker.api.schemas import (
    AssetEnvelope,
    AssetListResponse,
    AssetResponse,
    AssetUpsertRequest,
    StatusResponse,
)
from portfolio_tracker.domain.models import UserIdentity
from portfolio_tracker.services import AssetService

router = APIRouter(prefix="/api/user", tags=["assets"])


@router.get("/getassets", response_model=AssetListResponse)
def get_assets(
    user: UserIdentity = Depends(get_current_user),
    service: AssetService = Depends(get_asset_service),
):
    """List the caller's assets."""
    assets = service.list_assets(user.id)
    return AssetListResponse(data=[AssetResponse.from_domain(a) for a in assets])


@router.post("/addasset", response_model=AssetEnvelope, status_code=201)
def add_asset(
    data: AssetUpsertRequest,
    user: UserIdentity = Depends(get_current_user),
    service: AssetService = Depends(get_asset_service),
):
    """Create an asset for the caller."""
    asset = service.add_asset(user.id, data.to_input())
    return AssetEnvelope(message="Asset added successfully", data=AssetResponse.from_domain(asset))


@router.put("/updateasset/{asset_id}", response_model=AssetEnvelope)
def update_asset(
    asset_id: str,
    data: AssetUpsertRequest,
    user: UserIdentity = Depends(get_current_user),
    service: AssetService = Depends(get_asset_service),
):
    """Replace one of the caller's assets."""
    asset = service.update_asset(user.id, asset_id, data.to_input())
    return AssetEnvelope(message="Asset updated successfully", data=AssetResponse.from_domain(asset))


@router.delete("/deleteasset/{asset_id}", response_model=StatusResponse)
def delete_asset(
    asset_id: str,
    user: UserIdentity = Depends(get_current_user),
    service: AssetService = Depends(get_asset_service),
):
    """Delete one of the caller's assets."""
    service.delete_asset(user.id, asset_id)
    return StatusResponse(message="Asset deleted successfully")
