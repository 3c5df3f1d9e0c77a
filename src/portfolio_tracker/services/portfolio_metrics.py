"""Pure functions deriving portfolio metrics from an asset collection."""

from typing import Iterable

from portfolio_tracker.domain.models import Asset
from portfolio_tracker.domain.views import AllocationMap, PortfolioStats


def compute_portfolio_stats(assets: Iterable[Asset]) -> PortfolioStats:
    """
    Aggregate value and change of a collection.

    change_percent is 0 whenever nothing was invested, whatever the value.
    """
    total_value = 0.0
    total_invested = 0.0
    for asset in assets:
        total_value += asset.current_value
        total_invested += asset.invested_value

    change_amount = total_value - total_invested
    change_percent = (change_amount / total_invested) * 100 if total_invested > 0 else 0.0

    return PortfolioStats(
        total_value=total_value,
        total_invested=total_invested,
        change_amount=change_amount,
        change_percent=change_percent,
    )


def compute_allocation(assets: Iterable[Asset]) -> AllocationMap:
    """Sum current value per asset type, in first-seen type order."""
    allocation: AllocationMap = {}
    for asset in assets:
        allocation[asset.type] = allocation.get(asset.type, 0.0) + asset.current_value
    return allocation
