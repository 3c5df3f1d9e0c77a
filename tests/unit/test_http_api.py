"""
Unit tests for HttpPortfolioApi using httpx's mock transport.
"""

import json

import httpx
import pytest

from portfolio_tracker.core.exceptions import NetworkOrServerError
from portfolio_tracker.providers import HttpPortfolioApi


def make_api(handler) -> HttpPortfolioApi:
    client = httpx.Client(base_url="http://backend.test", transport=httpx.MockTransport(handler))
    return HttpPortfolioApi(client=client)


class TestHttpPortfolioApi:
    """Tests for request building and response decoding."""

    def test_login_posts_credentials(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"status": True, "token": "t"})

        response = make_api(handler).login("alice@example.com", "secret123")

        assert seen == {
            "method": "POST",
            "path": "/api/user/login",
            "body": {"email": "alice@example.com", "password": "secret123"},
            "auth": None,
        }
        assert response.ok is True
        assert response.token == "t"

    @pytest.mark.parametrize(
        "call,method,path",
        [
            (lambda api: api.get_assets("tok"), "GET", "/api/user/getassets"),
            (lambda api: api.refresh("tok"), "POST", "/api/user/refresh"),
            (lambda api: api.add_asset("tok", {"symbol": "X"}), "POST", "/api/user/addasset"),
            (lambda api: api.update_asset("tok", "a-1", {"symbol": "X"}), "PUT", "/api/user/updateasset/a-1"),
            (lambda api: api.delete_asset("tok", "a-1"), "DELETE", "/api/user/deleteasset/a-1"),
        ],
    )
    def test_authenticated_endpoints(self, call, method, path):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = (request.method, request.url.path, request.headers.get("Authorization"))
            return httpx.Response(200, json={"status": True})

        call(make_api(handler))

        assert seen["request"] == (method, path, "Bearer tok")

    def test_error_status_is_returned_not_raised(self):
        def handler(request):
            return httpx.Response(401, json={"status": False, "message": "Invalid email or password"})

        response = make_api(handler).login("a@b.c", "x")

        assert response.ok is False
        assert response.succeeded is False
        assert response.status_code == 401
        assert response.message == "Invalid email or password"

    def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkOrServerError) as exc_info:
            make_api(handler).get_assets("tok")

        assert exc_info.value.status_code is None

    def test_non_json_body(self):
        def handler(request):
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(NetworkOrServerError) as exc_info:
            make_api(handler).get_assets("tok")

        assert exc_info.value.status_code == 502

    def test_non_object_body(self):
        def handler(request):
            return httpx.Response(200, json=[1, 2, 3])

        with pytest.raises(NetworkOrServerError):
            make_api(handler).get_assets("tok")

    def test_close_leaves_borrowed_client_open(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
        api = HttpPortfolioApi(client=client)

        api.close()

        assert client.is_closed is False
