"""Tests for the error responses shared by every route."""

import pytest
from fastapi.testclient import TestClient

from shop_api.app.services.user_service import UserService


@pytest.fixture
def lenient_client(app):
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_unknown_route_uses_message_body(client) -> None:
    response = client.get("/no-such-route")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_wrong_method_uses_message_body(client) -> None:
    response = client.patch("/products")

    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}
    assert "allow" in response.headers


def test_unexpected_exception_returns_json_500(lenient_client, monkeypatch) -> None:
    async def overflowing(self, page=1, limit=10):
        raise OverflowError("MongoDB can only handle up to 8-byte ints")

    monkeypatch.setattr(UserService, "list_users", overflowing)

    response = lenient_client.get("/users")

    assert response.status_code == 500
    assert response.json() == {"message": "Server error", "error": "OverflowError"}
    assert "8-byte" not in response.text


@pytest.mark.parametrize(
    "url",
    ["/users?page=1000000000000000000&limit=1000", "/products?offset=1000000000000000000000"],
)
def test_out_of_range_pagination_returns_400(client, url) -> None:
    response = client.get(url)

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid data"
