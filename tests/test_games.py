"""Tests for the Free-to-Play game catalog proxy."""

import requests

from tests.conftest import CATALOG_URL, make_response

GAMES = [
    {"id": 452, "title": "Call Of Duty: Warzone", "genre": "Shooter"},
    {"id": 540, "title": "Overwatch 2", "genre": "Shooter"},
]


class TestListGames:
    """GET /f2p-games"""

    def test_relays_catalog_body(self, client, catalog_session) -> None:
        catalog_session.result = make_response(body=GAMES)

        response = client.get("/f2p-games")

        assert response.status_code == 200
        assert response.json() == GAMES
        assert catalog_session.calls == [{"url": f"{CATALOG_URL}/games", "params": None, "timeout": 3}]

    def test_upstream_error_status_returns_500(self, client, catalog_session) -> None:
        catalog_session.result = make_response(status_code=503, body={"status": 0})

        response = client.get("/f2p-games")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch Free-to-Play games", "error": "HTTPError"}

    def test_network_failure_returns_500(self, client, catalog_session) -> None:
        catalog_session.result = requests.ConnectionError("connection refused")

        response = client.get("/f2p-games")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "ConnectionError"
        assert "refused" not in response.text

    def test_body_that_is_not_json_returns_500(self, client, catalog_session) -> None:
        catalog_session.result = make_response(raw=b"<html>maintenance</html>")

        response = client.get("/f2p-games")

        assert response.status_code == 500
        assert response.json()["message"] == "Failed to fetch Free-to-Play games"


class TestGetGame:
    """GET /f2p-games/{id}"""

    def test_passes_id_as_query_parameter(self, client, catalog_session) -> None:
        catalog_session.result = make_response(body=GAMES[0])

        response = client.get("/f2p-games/452")

        assert response.status_code == 200
        assert response.json() == GAMES[0]
        assert catalog_session.calls[0]["url"] == f"{CATALOG_URL}/game"
        assert catalog_session.calls[0]["params"] == {"id": 452}

    def test_catalog_miss_returns_500(self, client, catalog_session) -> None:
        catalog_session.result = make_response(status_code=404, body={"status": 0, "status_message": "No game found"})

        response = client.get("/f2p-games/999999")

        assert response.status_code == 500
        assert response.json()["error"] == "HTTPError"

    def test_non_numeric_id_returns_400(self, client, catalog_session) -> None:
        response = client.get("/f2p-games/warzone")

        assert response.status_code == 400
        assert response.json()["errors"][0]["loc"] == ["path", "game_id"]
        assert catalog_session.calls == []
