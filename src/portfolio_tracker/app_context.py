"""Client context: wires storage, API client, session store and portfolio cache.

Provides a single object a front end can hold instead of looking services up
ambiently. The portfolio cache is subscribed to the session store here.
"""

from pathlib import Path
from typing import Optional

import httpx

from portfolio_tracker.config.settings import Settings, get_settings, set_settings
from portfolio_tracker.providers import HttpPortfolioApi, PortfolioApi, StaticHistoricalData
from portfolio_tracker.repositories.local import JsonFileStorage
from portfolio_tracker.repositories.protocols import ClientStorage
from portfolio_tracker.services import PortfolioCache, SessionStore


class ClientContext:
    """
    Client-side application context.

    Services are created lazily on first access; start() restores the
    persisted session, which in turn triggers the first portfolio fetch.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        api: Optional[PortfolioApi] = None,
        storage: Optional[ClientStorage] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize client context.

        Args:
            data_dir: Directory for the client state file. Uses settings if not provided.
            api: Backend API implementation. Built from settings if not provided.
            storage: Durable storage. A JSON file under data_dir if not provided.
            http_client: Existing httpx client for the default API implementation.
        """
        if data_dir is not None:
            set_settings(Settings(data_dir=data_dir))
        self._api = api
        self._storage = storage
        self._http_client = http_client
        self._owned_api: Optional[HttpPortfolioApi] = None
        self._session_store: Optional[SessionStore] = None
        self._portfolio: Optional[PortfolioCache] = None
        self._unsubscribe = None

    @property
    def settings(self) -> Settings:
        return get_settings()

    @property
    def api(self) -> PortfolioApi:
        """Get the backend API client."""
        if self._api is None:
            settings = self.settings
            self._owned_api = HttpPortfolioApi(
                base_url=settings.api_base_url,
                timeout=settings.request_timeout_seconds,
                client=self._http_client,
            )
            self._api = self._owned_api
        return self._api

    @property
    def storage(self) -> ClientStorage:
        """Get the durable client storage."""
        if self._storage is None:
            self._storage = JsonFileStorage(self.settings.get_client_state_path())
        return self._storage

    @property
    def session(self) -> SessionStore:
        """Get the SessionStore instance."""
        if self._session_store is None:
            self._session_store = SessionStore(api=self.api, storage=self.storage)
        return self._session_store

    @property
    def portfolio(self) -> PortfolioCache:
        """Get the PortfolioCache instance, subscribed to the session store."""
        if self._portfolio is None:
            self._portfolio = self._build_portfolio()
        return self._portfolio

    def start(self) -> None:
        """Restore the persisted session; the cache fetches if one is found."""
        # The cache must be subscribed before restore()
        if self._portfolio is None:
            self._portfolio = self._build_portfolio()
        self.session.restore()

    @property
    def is_started(self) -> bool:
        return self._session_store is not None and self._session_store.initialized

    def _build_portfolio(self) -> PortfolioCache:
        portfolio = PortfolioCache(
            api=self.api,
            tokens=self.session,
            storage=self.storage,
            history=StaticHistoricalData(),
        )
        self._unsubscribe = self.session.subscribe(portfolio.handle_identity_change)
        return portfolio

    def close(self) -> None:
        """Clean up resources."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._owned_api is not None:
            self._owned_api.close()
            self._owned_api = None
