#!/usr/bin/env python3
"""
Seed a demo user with a realistic spread of holdings.

Writes directly to the configured database through the service layer, so
the backend does not need to be running.
"""

import random
import sys
from datetime import date, timedelta

from portfolio_tracker.config.settings import get_settings
from portfolio_tracker.core.exceptions import ValidationError
from portfolio_tracker.repositories.sqlalchemy import (
    SqlAlchemyAssetRepository,
    SqlAlchemyUserRepository,
    init_db,
    session_scope,
)
from portfolio_tracker.services import AssetInput, AssetService, AuthService

DEMO_NAME = "Demo Investor"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo-password"

# (name, symbol, type, approximate current price)
HOLDINGS = [
    ("Apple Inc.", "AAPL", "stock", 212.5),
    ("Microsoft", "MSFT", "stock", 442.5),
    ("NVIDIA", "NVDA", "stock", 131.9),
    ("Vanguard Total Market", "VTI", "etf", 266.0),
    ("Vanguard Total Bond", "BND", "bond", 71.8),
    ("Bitcoin", "BTC", "crypto", 66000.0),
    ("Ethereum", "ETH", "crypto", 3500.0),
    ("Gold Trust", "GLD", "commodity", 215.3),
]


def seed_demo_data() -> None:
    """Create the demo user (if missing) and a fresh set of holdings."""
    settings = get_settings()
    init_db()
    with session_scope() as db:
        auth = AuthService(
            SqlAlchemyUserRepository(db),
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        try:
            auth.signup(DEMO_NAME, DEMO_EMAIL, DEMO_PASSWORD)
            print(f"✓ Created user {DEMO_EMAIL}")
        except ValidationError:
            print(f"✓ User {DEMO_EMAIL} already exists")

        user = SqlAlchemyUserRepository(db).get_by_email(DEMO_EMAIL)
        assets = AssetService(SqlAlchemyAssetRepository(db))
        for existing in assets.list_assets(user.user_id):
            assets.delete_asset(user.user_id, existing.id)

        rng = random.Random(7)
        today = date.today()
        for name, symbol, asset_type, price in HOLDINGS:
            purchase_price = round(price * rng.uniform(0.7, 1.15), 2)
            quantity = round(rng.uniform(0.05, 1.0), 4) if price > 1000 else round(rng.uniform(5, 50), 2)
            assets.add_asset(
                user.user_id,
                AssetInput(
                    name=name,
                    symbol=symbol,
                    type=asset_type,
                    quantity=quantity,
                    purchase_price=purchase_price,
                    current_price=price,
                    purchase_date=today - timedelta(days=rng.randint(30, 720)),
                ),
            )
            print(f"  + {symbol:<5} {quantity:>10} @ {purchase_price:>10,.2f}")
    print(f"\nSign in with {DEMO_EMAIL} / {DEMO_PASSWORD}")


if __name__ == "__main__":
    seed_demo_data()
    sys.exit(0)
