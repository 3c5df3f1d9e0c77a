"""View models for service outputs."""

from portfolio_tracker.domain.views.portfolio import (
    PortfolioStats,
    AllocationMap,
    HistoryPoint,
)

__all__ = [
    "PortfolioStats",
    "AllocationMap",
    "HistoryPoint",
]
