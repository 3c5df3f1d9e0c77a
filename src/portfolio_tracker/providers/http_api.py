"""httpx-backed implementation of PortfolioApi."""

import logging
from typing import Any, Optional

import httpx

from portfolio_tracker.core.exceptions import NetworkOrServerError
from portfolio_tracker.providers.portfolio_api import ApiResponse

logger = logging.getLogger(__name__)

USER_PREFIX = "/api/user"


class HttpPortfolioApi:
    """
    Talks to the portfolio backend over HTTP.

    Pass an existing httpx.Client (for example FastAPI's TestClient) to
    reuse its transport and base URL; otherwise one is created from
    base_url and owned by this instance.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3777",
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def login(self, email: str, password: str) -> ApiResponse:
        return self._request("POST", "/login", json={"email": email, "password": password})

    def signup(self, name: str, email: str, password: str) -> ApiResponse:
        return self._request(
            "POST",
            "/signup",
            json={"name": name, "email": email, "password": password},
        )

    def refresh(self, token: str) -> ApiResponse:
        return self._request("POST", "/refresh", token=token)

    def get_assets(self, token: str) -> ApiResponse:
        return self._request("GET", "/getassets", token=token)

    def add_asset(self, token: str, payload: dict[str, Any]) -> ApiResponse:
        return self._request("POST", "/addasset", token=token, json=payload)

    def update_asset(self, token: str, asset_id: str, payload: dict[str, Any]) -> ApiResponse:
        return self._request("PUT", f"/updateasset/{asset_id}", token=token, json=payload)

    def delete_asset(self, token: str, asset_id: str) -> ApiResponse:
        return self._request("DELETE", f"/deleteasset/{asset_id}", token=token)

    def close(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> ApiResponse:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = f"{USER_PREFIX}{path}"
        try:
            response = self._client.request(method, url, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.debug("%s %s failed: %s", method, url, e)
            raise NetworkOrServerError(f"Request to {url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise NetworkOrServerError(
                f"Non-JSON response from {url}",
                status_code=response.status_code,
            ) from e
        if not isinstance(payload, dict):
            raise NetworkOrServerError(
                f"Unexpected response shape from {url}",
                status_code=response.status_code,
            )

        return ApiResponse(status_code=response.status_code, payload=payload)
