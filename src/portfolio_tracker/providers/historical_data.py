"""Static historical value series for charting."""

import random
import zlib
from datetime import date, timedelta
from typing import Optional

from portfolio_tracker.domain.views import HistoryPoint

DEFAULT_KEY = "default"

# Series end on a fixed date so the table is identical on every run
_ANCHOR = date(2024, 6, 14)

# timeframe -> (number of points, days between points)
TIMEFRAMES: dict[str, tuple[int, int]] = {
    "1D": (24, 0),
    "1W": (7, 1),
    "1M": (30, 1),
    "3M": (13, 7),
    "1Y": (12, 30),
    "ALL": (10, 182),
}

# symbol -> (latest value, per-step volatility)
_SYMBOL_PROFILES: dict[str, tuple[float, float]] = {
    "BTC": (66000.0, 0.035),
    "ETH": (3500.0, 0.04),
    "SOL": (145.0, 0.05),
    "AAPL": (212.5, 0.012),
    "MSFT": (442.5, 0.01),
    "GOOGL": (178.4, 0.013),
    "AMZN": (183.7, 0.014),
    "TSLA": (178.0, 0.03),
    "NVDA": (131.9, 0.025),
    "SPY": (542.8, 0.007),
    "VTI": (266.0, 0.007),
    "BND": (71.8, 0.002),
    "GLD": (215.3, 0.008),
    DEFAULT_KEY: (100.0, 0.01),
}


def _build_series(key: str, latest: float, volatility: float, count: int, step_days: int) -> list[HistoryPoint]:
    """Walk backwards from the latest value with a seeded random walk."""
    rng = random.Random(zlib.crc32(f"{key}:{count}:{step_days}".encode()))
    values = [latest]
    for _ in range(count - 1):
        values.append(values[-1] / (1 + rng.uniform(-volatility, volatility)))
    values.reverse()

    points = []
    for i, value in enumerate(values):
        offset = count - 1 - i
        if step_days == 0:
            # Intraday: one point per hour on the anchor date
            label = f"{_ANCHOR.isoformat()}T{(24 - count + i):02d}:00"
        else:
            label = (_ANCHOR - timedelta(days=offset * step_days)).isoformat()
        points.append(HistoryPoint(date=label, value=round(value, 2)))
    return points


def _build_table() -> dict[str, dict[str, list[HistoryPoint]]]:
    table: dict[str, dict[str, list[HistoryPoint]]] = {}
    for key, (latest, volatility) in _SYMBOL_PROFILES.items():
        table[key] = {
            timeframe: _build_series(key, latest, volatility, count, step)
            for timeframe, (count, step) in TIMEFRAMES.items()
        }
    return table


class StaticHistoricalData:
    """
    Lookup table of historical series keyed by symbol then timeframe.

    Unknown symbols fall back to the default series; an unknown timeframe
    yields None.
    """

    def __init__(self, table: Optional[dict[str, dict[str, list[HistoryPoint]]]] = None):
        self._table = table if table is not None else HISTORICAL_DATA

    def has_symbol(self, symbol: str) -> bool:
        return symbol.upper() in self._table

    def get_series(self, symbol: str, timeframe: str) -> Optional[list[HistoryPoint]]:
        """Series for symbol/timeframe, using the default series for unknown symbols."""
        by_timeframe = self._table.get(symbol.upper()) or self._table.get(DEFAULT_KEY, {})
        series = by_timeframe.get(timeframe)
        return list(series) if series is not None else None


HISTORICAL_DATA = _build_table()
