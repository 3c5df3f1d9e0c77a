"""External data providers: backend API client and historical data."""

from portfolio_tracker.providers.portfolio_api import ApiResponse, PortfolioApi
from portfolio_tracker.providers.http_api import HttpPortfolioApi
from portfolio_tracker.providers.historical_data import StaticHistoricalData

__all__ = [
    "ApiResponse",
    "PortfolioApi",
    "HttpPortfolioApi",
    "StaticHistoricalData",
]
