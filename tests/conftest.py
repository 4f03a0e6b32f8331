"""Pytest configuration and shared fixtures."""

import asyncio
import json
from typing import Any, Dict, List, Optional

import pytest
import requests
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from shop_api.app.core.config import Settings
from shop_api.app.main import create_app
from shop_api.app.services.game_catalog import GameCatalogClient

CATALOG_URL = "https://catalog.test/api"


def make_response(status_code: int = 200, body: Any = None, raw: Optional[bytes] = None) -> requests.Response:
    """Build a ``requests.Response`` carrying ``body`` as JSON (or ``raw`` bytes)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.url = CATALOG_URL
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    return response


class StubSession:
    """Replays one canned response (or exception) for every GET."""

    def __init__(self) -> None:
        self.result: Any = make_response(body=[])
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if isinstance(self.result, Exception):
            raise self.result
        return self.result

    def close(self) -> None:
        self.closed = True


def run(coro):
    """Run a coroutine against the in-memory database from a sync test."""
    return asyncio.run(coro)


@pytest.fixture
def database():
    return AsyncMongoMockClient()["shop_test"]


@pytest.fixture
def catalog_session() -> StubSession:
    return StubSession()


@pytest.fixture
def app(database, catalog_session):
    catalog = GameCatalogClient(base_url=CATALOG_URL, timeout=3, session=catalog_session)
    return create_app(Settings(log_level="WARNING"), database=database, catalog=catalog)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_product(client):
    """Create a product through the API and return its JSON body."""

    def _make(name: str = "Book", about: str = "Paper", price: float = 10) -> Dict[str, Any]:
        response = client.post("/products", json={"name": name, "about": about, "price": price})
        assert response.status_code == 201, response.text
        return response.json()

    return _make
