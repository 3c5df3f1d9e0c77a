"""
Portfolio cache for the signed-in user.

Holds the asset collection of whoever the session currently belongs to and
the statistics derived from it. The collection is only ever replaced
wholesale: by a successful fetch, or by an empty reset when the identity
changes or a fetch fails.
"""

import json
import logging
from typing import Any, Callable, Optional, Protocol

from portfolio_tracker.core.exceptions import AuthenticationError, NetworkOrServerError
from portfolio_tracker.domain.models import Asset
from portfolio_tracker.domain.views import AllocationMap, HistoryPoint, PortfolioStats
from portfolio_tracker.providers.historical_data import StaticHistoricalData
from portfolio_tracker.providers.portfolio_api import ApiResponse, PortfolioApi
from portfolio_tracker.repositories.protocols import ClientStorage
from portfolio_tracker.services.portfolio_metrics import compute_allocation, compute_portfolio_stats
from portfolio_tracker.services.session_store import PORTFOLIO_KEY

logger = logging.getLogger(__name__)


class TokenSource(Protocol):
    """Anything that can hand out the current bearer token."""

    def valid_token(self) -> Optional[str]:
        ...


class PortfolioCache:
    """
    Asset collection and derived stats of the current user.

    Wire it to a SessionStore with
    ``session_store.subscribe(cache.handle_identity_change)``.
    """

    def __init__(
        self,
        api: PortfolioApi,
        tokens: TokenSource,
        storage: Optional[ClientStorage] = None,
        history: Optional[StaticHistoricalData] = None,
    ):
        self._api = api
        self._tokens = tokens
        self._storage = storage
        self._history = history or StaticHistoricalData()
        self._assets: list[Asset] = []
        self._stats = PortfolioStats()
        self._loading = False

    @property
    def assets(self) -> list[Asset]:
        return list(self._assets)

    @property
    def stats(self) -> PortfolioStats:
        return self._stats

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def portfolio_value(self) -> float:
        return self._stats.total_value

    @property
    def portfolio_change_amount(self) -> float:
        return self._stats.change_amount

    @property
    def portfolio_change_percent(self) -> float:
        return self._stats.change_percent

    def handle_identity_change(self, previous_user_id: Optional[str], current_user_id: Optional[str]) -> None:
        """
        Reset on any identity change, then refetch if someone is signed in.

        The reset happens before the fetch is issued so the previous user's
        holdings are never visible to the next one.
        """
        if previous_user_id == current_user_id:
            return
        self._clear()
        if current_user_id is not None:
            self.fetch_assets()

    def fetch_assets(self) -> None:
        """
        Replace the collection with the server's copy.

        Best effort: any failure leaves an empty collection and is only
        logged.
        """
        token = self._tokens.valid_token()
        if token is None:
            self._clear()
            return

        self._loading = True
        try:
            response = self._api.get_assets(token)
            if not response.succeeded:
                logger.warning(
                    "Failed to fetch assets (%s): %s",
                    response.status_code,
                    response.message or "unsuccessful response",
                )
                self._clear()
                return
            assets = [Asset.from_api(item) for item in response.payload.get("data") or []]
        except NetworkOrServerError as e:
            logger.error("Error loading portfolio data: %s", e.message)
            self._clear()
            return
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed asset list from server: %r", e)
            self._clear()
            return
        finally:
            self._loading = False

        self._assets = assets
        self._stats = compute_portfolio_stats(assets)
        self._mirror()

    def add_asset(self, asset: Asset) -> dict[str, Any]:
        """Create an asset on the server, then re-sync."""
        return self._mutate(
            "add",
            lambda token: self._api.add_asset(token, asset.to_upsert_payload()),
        )

    def update_asset(self, asset: Asset) -> dict[str, Any]:
        """Update an asset on the server, then re-sync."""
        return self._mutate(
            "update",
            lambda token: self._api.update_asset(token, asset.id, asset.to_upsert_payload()),
        )

    def remove_asset(self, asset_id: str) -> dict[str, Any]:
        """Delete an asset on the server, then re-sync."""
        return self._mutate(
            "delete",
            lambda token: self._api.delete_asset(token, asset_id),
        )

    def get_asset_historical_data(self, asset_id: str, timeframe: str = "1M") -> Optional[list[HistoryPoint]]:
        """Historical series for a held asset, or None if it is not held."""
        asset = next((a for a in self._assets if a.id == asset_id), None)
        if asset is None:
            return None
        return self._history.get_series(asset.symbol, timeframe)

    def get_asset_allocation(self) -> AllocationMap:
        """Current value per asset type, recomputed on every call."""
        return compute_allocation(self._assets)

    def _mutate(self, action: str, request: Callable[[str], ApiResponse]) -> dict[str, Any]:
        token = self._tokens.valid_token()
        if token is None:
            raise AuthenticationError("Not authenticated")

        try:
            response = request(token)
        except NetworkOrServerError as e:
            logger.error("Error trying to %s asset: %s", action, e.message)
            raise

        if not response.succeeded:
            message = response.message or f"Failed to {action} asset"
            logger.error("Failed to %s asset: %s", action, message)
            raise NetworkOrServerError(message, status_code=response.status_code)

        # Full re-sync; the server copy is authoritative
        self.fetch_assets()
        return response.payload

    def _clear(self) -> None:
        self._assets = []
        self._stats = PortfolioStats()
        if self._storage is not None:
            self._storage.remove_item(PORTFOLIO_KEY)

    def _mirror(self) -> None:
        """Write the legacy snapshot key; it is never read back."""
        if self._storage is not None:
            self._storage.set_item(PORTFOLIO_KEY, json.dumps([a.to_api() for a in self._assets]))
