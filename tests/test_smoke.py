"""Smoke tests: the package imports and the client context wires up."""

from portfolio_tracker import __version__
from portfolio_tracker.app_context import ClientContext
from portfolio_tracker.config.settings import reset_settings
from portfolio_tracker.domain.views import PortfolioStats
from portfolio_tracker.repositories.local import InMemoryStorage

from tests.conftest import FakePortfolioApi


class TestPackage:
    """Test package metadata."""

    def test_version(self):
        assert __version__ == "0.1.0"


class TestClientContext:
    """Test ClientContext wiring."""

    def test_start_without_persisted_session(self):
        """Fresh context starts unauthenticated with an empty portfolio."""
        ctx = ClientContext(api=FakePortfolioApi(), storage=InMemoryStorage())

        assert ctx.is_started is False
        ctx.start()

        assert ctx.is_started is True
        assert ctx.session.current_user is None
        assert ctx.portfolio.stats == PortfolioStats()
        ctx.close()

    def test_login_reaches_portfolio(self):
        """Login through the context populates the subscribed cache."""
        api = FakePortfolioApi()
        api.register("alice@example.com", name="Alice", user_id="user-alice")
        ctx = ClientContext(api=api, storage=InMemoryStorage())
        ctx.start()

        ctx.session.login("alice@example.com", "secret123")

        assert api.calls_to("get_assets") == 1
        assert ctx.portfolio.assets == []
        ctx.close()

    def test_close_unsubscribes_cache(self):
        api = FakePortfolioApi()
        api.register("alice@example.com", user_id="user-alice")
        ctx = ClientContext(api=api, storage=InMemoryStorage())
        ctx.start()
        ctx.close()

        ctx.session.login("alice@example.com", "secret123")

        assert api.calls_to("get_assets") == 0

    def test_default_storage_lives_under_data_dir(self, tmp_path):
        ctx = ClientContext(data_dir=tmp_path, api=FakePortfolioApi())
        try:
            assert ctx.storage.path == tmp_path / "client_state.json"
        finally:
            ctx.close()
            reset_settings()
