"""Backend API provider protocol and response type."""

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol


@dataclass
class ApiResponse:
    """Decoded HTTP response from the portfolio backend."""

    status_code: int
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """HTTP-level success (2xx)."""
        return 200 <= self.status_code < 300

    @property
    def succeeded(self) -> bool:
        """HTTP success and a true `status` flag in the envelope."""
        return self.ok and self.payload.get("status") is True

    @property
    def message(self) -> Optional[str]:
        message = self.payload.get("message")
        return str(message) if message else None

    @property
    def token(self) -> Optional[str]:
        token = self.payload.get("token")
        return token if isinstance(token, str) and token else None


class PortfolioApi(Protocol):
    """
    Protocol for the portfolio REST backend.

    Implementations return ApiResponse for every answered request, including
    4xx/5xx, and raise NetworkOrServerError only when no usable response was
    received (transport failure, non-JSON body).
    """

    def login(self, email: str, password: str) -> ApiResponse:
        ...

    def signup(self, name: str, email: str, password: str) -> ApiResponse:
        ...

    def refresh(self, token: str) -> ApiResponse:
        ...

    def get_assets(self, token: str) -> ApiResponse:
        ...

    def add_asset(self, token: str, payload: dict[str, Any]) -> ApiResponse:
        ...

    def update_asset(self, token: str, asset_id: str, payload: dict[str, Any]) -> ApiResponse:
        ...

    def delete_asset(self, token: str, asset_id: str) -> ApiResponse:
        ...
