"""
Pytest configuration and fixtures for portfolio tracker tests.

This module provides:
- Token helpers and fixed clocks
- A fake in-memory backend implementing the PortfolioApi protocol
- Client service fixtures (storage, session store, portfolio cache)
- In-memory SQLite database fixtures
- Backend service and repository fixtures
- FastAPI test client fixture
"""

import base64
import copy
import uuid
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session

from portfolio_tracker.config.settings import Settings, set_settings, reset_settings
from portfolio_tracker.core.exceptions import NetworkOrServerError
from portfolio_tracker.core.timezone import UTC
from portfolio_tracker.domain.models import Asset
from portfolio_tracker.providers.portfolio_api import ApiResponse
from portfolio_tracker.repositories.local import InMemoryStorage
from portfolio_tracker.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from portfolio_tracker.repositories.sqlalchemy import orm_models  # noqa: F401
from portfolio_tracker.repositories.sqlalchemy import (
    SqlAlchemyUserRepository,
    SqlAlchemyAssetRepository,
)
from portfolio_tracker.services import (
    AuthService,
    AssetService,
    PortfolioCache,
    SessionStore,
)

TEST_SECRET = "test-secret"


# =============================================================================
# TIME AND TOKEN HELPERS
# =============================================================================


def utc_datetime(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    """Create an aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute))


def make_token(
    user_id: str = "user-1",
    email: str = "alice@example.com",
    name: str = "Alice",
    expires_in: timedelta = timedelta(hours=1),
    now: Optional[datetime] = None,
) -> str:
    """Sign a token shaped like the backend's."""
    issued_at = now or datetime.now(UTC)
    claims = {
        "id": user_id,
        "email": email,
        "name": name,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + expires_in).timestamp()),
    }
    return jwt.encode(claims, TEST_SECRET, algorithm="HS256")


def token_with_raw_exp(exp_literal: str) -> str:
    """Unsigned JWT whose payload carries exp exactly as the given JSON literal."""

    def segment(text: str) -> str:
        return base64.urlsafe_b64encode(text.encode()).rstrip(b"=").decode()

    header = segment('{"alg":"HS256","typ":"JWT"}')
    payload = segment('{"id":"user-1","email":"a@b.c","name":"A","exp":' + exp_literal + "}")
    return f"{header}.{payload}.{segment('sig')}"


def make_asset(
    asset_id: Optional[str] = None,
    symbol: str = "AAPL",
    asset_type: str = "stock",
    quantity: float = 1.0,
    purchase_price: float = 100.0,
    current_price: float = 100.0,
    name: Optional[str] = None,
) -> Asset:
    """Build a client-side Asset."""
    return Asset(
        id=asset_id or uuid.uuid4().hex,
        name=name or symbol,
        symbol=symbol,
        type=asset_type,
        quantity=quantity,
        purchase_price=purchase_price,
        current_price=current_price,
    )


# =============================================================================
# FAKE BACKEND
# =============================================================================


class FakePortfolioApi:
    """
    In-memory backend speaking the PortfolioApi protocol.

    Responses can be overridden per endpoint, and on_get_assets lets a test
    observe client state at the moment the asset list is requested.
    """

    def __init__(self, token_ttl: timedelta = timedelta(hours=1)):
        self.token_ttl = token_ttl
        self.users: dict[str, dict[str, str]] = {}
        self.assets: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, ...]] = []
        self.overrides: dict[str, ApiResponse] = {}
        self.errors: dict[str, Exception] = {}
        self.on_get_assets: Optional[Callable[[str], None]] = None

    def register(
        self,
        email: str,
        password: str = "secret123",
        name: str = "Alice",
        user_id: Optional[str] = None,
        assets: Optional[list[Asset]] = None,
    ) -> str:
        user_id = user_id or uuid.uuid4().hex
        self.users[email] = {"id": user_id, "name": name, "password": password}
        self.assets[user_id] = [a.to_api() for a in assets or []]
        return user_id

    def calls_to(self, endpoint: str) -> int:
        return sum(1 for call in self.calls if call[0] == endpoint)

    def login(self, email: str, password: str) -> ApiResponse:
        self.calls.append(("login", email))
        if canned := self._canned("login"):
            return canned
        user = self.users.get(email)
        if user is None or user["password"] != password:
            return ApiResponse(401, {"status": False, "message": "Invalid email or password"})
        return self._token_response(user["id"], email, user["name"])

    def signup(self, name: str, email: str, password: str) -> ApiResponse:
        self.calls.append(("signup", email))
        if canned := self._canned("signup"):
            return canned
        if email in self.users:
            return ApiResponse(400, {"status": False, "message": "User with this email already exists"})
        user_id = self.register(email, password=password, name=name)
        return self._token_response(user_id, email, name, status_code=201)

    def refresh(self, token: str) -> ApiResponse:
        self.calls.append(("refresh", token))
        if canned := self._canned("refresh"):
            return canned
        claims = jwt.get_unverified_claims(token)
        # Longer lifetime so a refreshed token always differs from the original
        return self._token_response(
            claims["id"], claims["email"], claims["name"], ttl=self.token_ttl * 2
        )

    def get_assets(self, token: str) -> ApiResponse:
        self.calls.append(("get_assets", token))
        if self.on_get_assets is not None:
            self.on_get_assets(token)
        if canned := self._canned("get_assets"):
            return canned
        user_id = jwt.get_unverified_claims(token)["id"]
        return ApiResponse(200, {"status": True, "data": copy.deepcopy(self.assets.get(user_id, []))})

    def add_asset(self, token: str, payload: dict[str, Any]) -> ApiResponse:
        self.calls.append(("add_asset", payload["symbol"]))
        if canned := self._canned("add_asset"):
            return canned
        user_id = jwt.get_unverified_claims(token)["id"]
        item = self._item_from_payload(uuid.uuid4().hex, payload)
        self.assets.setdefault(user_id, []).append(item)
        return ApiResponse(201, {"status": True, "message": "Asset added successfully", "data": item})

    def update_asset(self, token: str, asset_id: str, payload: dict[str, Any]) -> ApiResponse:
        self.calls.append(("update_asset", asset_id))
        if canned := self._canned("update_asset"):
            return canned
        user_id = jwt.get_unverified_claims(token)["id"]
        items = self.assets.get(user_id, [])
        for i, item in enumerate(items):
            if item["id"] == asset_id:
                items[i] = self._item_from_payload(asset_id, payload)
                return ApiResponse(200, {"status": True, "message": "Asset updated successfully", "data": items[i]})
        return ApiResponse(404, {"status": False, "message": f"Asset not found: {asset_id}"})

    def delete_asset(self, token: str, asset_id: str) -> ApiResponse:
        self.calls.append(("delete_asset", asset_id))
        if canned := self._canned("delete_asset"):
            return canned
        user_id = jwt.get_unverified_claims(token)["id"]
        items = self.assets.get(user_id, [])
        remaining = [item for item in items if item["id"] != asset_id]
        if len(remaining) == len(items):
            return ApiResponse(404, {"status": False, "message": f"Asset not found: {asset_id}"})
        self.assets[user_id] = remaining
        return ApiResponse(200, {"status": True, "message": "Asset deleted successfully"})

    def _canned(self, endpoint: str) -> Optional[ApiResponse]:
        if endpoint in self.errors:
            raise self.errors[endpoint]
        return self.overrides.get(endpoint)

    def _token_response(
        self,
        user_id: str,
        email: str,
        name: str,
        status_code: int = 200,
        ttl: Optional[timedelta] = None,
    ) -> ApiResponse:
        token = make_token(user_id, email, name, expires_in=ttl or self.token_ttl)
        return ApiResponse(status_code, {"status": True, "token": token})

    @staticmethod
    def _item_from_payload(asset_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": asset_id,
            "name": payload["assetName"],
            "symbol": payload["symbol"],
            "type": payload["assetType"],
            "quantity": payload["Quantity"],
            "purchasePrice": payload["purchasePrice"],
            "purchaseDate": payload.get("purchaseDate"),
            "currentPrice": payload["currentPrice"],
            "logoUrl": payload.get("logoUrl"),
        }


# =============================================================================
# CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30)


@pytest.fixture
def storage() -> InMemoryStorage:
    """Provide empty client storage."""
    return InMemoryStorage()


@pytest.fixture
def fake_api() -> FakePortfolioApi:
    """Provide a fake backend with no users."""
    return FakePortfolioApi()


@pytest.fixture
def session_store(fake_api, storage) -> SessionStore:
    """Provide a SessionStore over the fake backend."""
    return SessionStore(api=fake_api, storage=storage)


@pytest.fixture
def portfolio_cache(fake_api, session_store, storage) -> PortfolioCache:
    """Provide a PortfolioCache subscribed to the session store."""
    cache = PortfolioCache(api=fake_api, tokens=session_store, storage=storage)
    session_store.subscribe(cache.handle_identity_change)
    return cache


@pytest.fixture
def alice_assets() -> list[Asset]:
    """Alice's holdings: worth 250, cost 220."""
    return [
        make_asset("a-1", symbol="AAPL", asset_type="stock", quantity=2, purchase_price=80, current_price=100),
        make_asset("a-2", symbol="BND", asset_type="bond", quantity=1, purchase_price=60, current_price=50),
    ]


@pytest.fixture
def bob_assets() -> list[Asset]:
    """Bob's holdings: a single crypto position."""
    return [
        make_asset("b-1", symbol="BTC", asset_type="crypto", quantity=0.5, purchase_price=30000, current_price=60000),
    ]


@pytest.fixture
def registered_users(fake_api, alice_assets, bob_assets) -> FakePortfolioApi:
    """Register Alice and Bob with their holdings on the fake backend."""
    fake_api.register("alice@example.com", name="Alice", user_id="user-alice", assets=alice_assets)
    fake_api.register("bob@example.com", name="Bob", user_id="user-bob", assets=bob_assets)
    return fake_api


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_repo(test_session) -> SqlAlchemyUserRepository:
    """Provide test UserRepository."""
    return SqlAlchemyUserRepository(test_session)


@pytest.fixture
def asset_repo(test_session) -> SqlAlchemyAssetRepository:
    """Provide test AssetRepository."""
    return SqlAlchemyAssetRepository(test_session)


@pytest.fixture
def auth_service(user_repo) -> AuthService:
    """Provide test AuthService."""
    return AuthService(user_repo=user_repo, secret=TEST_SECRET, token_ttl_minutes=60)


@pytest.fixture
def asset_service(asset_repo) -> AssetService:
    """Provide test AssetService."""
    return AssetService(asset_repo=asset_repo)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, tmp_path) -> TestClient:
    """Provide FastAPI test client with test database and settings."""
    from portfolio_tracker.main import app

    # Lifespan creates tables on the configured engine; keep it under tmp_path
    reset_database()
    set_settings(Settings(data_dir=tmp_path, jwt_secret=TEST_SECRET))

    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


@pytest.fixture
def signup_user(client: TestClient) -> Callable[..., str]:
    """Factory registering a user through the API and returning its token."""

    def _signup(
        email: str = "alice@example.com",
        name: str = "Alice",
        password: str = "secret123",
    ) -> str:
        response = client.post(
            "/api/user/signup",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()["token"]

    return _signup


def auth_header(token: str) -> dict[str, str]:
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}


def asset_payload(
    name: str = "Apple Inc.",
    symbol: str = "AAPL",
    asset_type: str = "stock",
    quantity: float = 10,
    purchase_price: float = 150.0,
    current_price: float = 180.0,
    purchase_date: Optional[str] = "2024-01-15",
) -> dict[str, Any]:
    """Add/update request body with the legacy wire names."""
    return {
        "assetName": name,
        "symbol": symbol,
        "assetType": asset_type,
        "Quantity": quantity,
        "purchasePrice": purchase_price,
        "currentPrice": current_price,
        "purchaseDate": purchase_date,
        "logoUrl": None,
    }


@pytest.fixture
def failing_network() -> NetworkOrServerError:
    """A transport failure as raised by the HTTP provider."""
    return NetworkOrServerError("Request to /api/user failed: connection refused")
