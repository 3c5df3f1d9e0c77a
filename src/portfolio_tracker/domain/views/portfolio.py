"""View models for derived portfolio outputs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PortfolioStats:
    """Aggregate value/change metrics of an asset collection."""

    total_value: float = 0.0
    total_invested: float = 0.0
    change_amount: float = 0.0
    change_percent: float = 0.0


# Asset type -> summed current value
AllocationMap = dict[str, float]


@dataclass(frozen=True)
class HistoryPoint:
    """One point of a historical value series."""

    date: str
    value: float
