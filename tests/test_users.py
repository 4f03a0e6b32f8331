"""Tests for the user endpoints."""

from shop_api.app.core.security import verify_password
from tests.conftest import run

VALID_USER = {"username": "alice", "password": "wonderland", "email": "alice@example.com"}


class TestCreateUser:
    """POST /users"""

    def test_valid_user_returns_201_without_credentials(self, client) -> None:
        response = client.post("/users", json=VALID_USER)

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"id", "username", "email"}
        assert body["username"] == "alice"
        assert body["email"] == "alice@example.com"
        assert "wonderland" not in response.text

    def test_password_is_stored_as_digest(self, client, database) -> None:
        response = client.post("/users", json=VALID_USER)

        stored = run(database["users"].find_one({"username": "alice"}))

        assert stored["password"] != "wonderland"
        assert verify_password("wonderland", stored["password"])
        assert stored["password"] not in response.text

    def test_short_password_returns_400_on_password_field(self, client, database) -> None:
        response = client.post("/users", json={"username": "a", "password": "short", "email": "a@example.com"})

        assert response.status_code == 400
        assert [err["loc"] for err in response.json()["errors"]] == [["body", "password"]]
        assert "short" not in response.text
        assert run(database["users"].count_documents({})) == 0

    def test_invalid_email_returns_400(self, client) -> None:
        response = client.post("/users", json={**VALID_USER, "email": "not-an-email"})

        assert response.status_code == 400
        assert ["body", "email"] in [err["loc"] for err in response.json()["errors"]]

    def test_missing_username_returns_400(self, client) -> None:
        payload = {"password": "wonderland", "email": "alice@example.com"}

        response = client.post("/users", json=payload)

        assert response.status_code == 400
        assert ["body", "username"] in [err["loc"] for err in response.json()["errors"]]


class TestListUsers:
    """GET /users"""

    def _create_users(self, client, count: int) -> None:
        for i in range(count):
            payload = {"username": f"user{i}", "password": "secret123", "email": f"user{i}@example.com"}
            assert client.post("/users", json=payload).status_code == 201

    def test_defaults_to_first_page_of_ten(self, client) -> None:
        self._create_users(client, 12)

        response = client.get("/users")

        assert response.status_code == 200
        assert len(response.json()) == 10
        assert response.json()[0]["username"] == "user0"

    def test_page_and_limit(self, client) -> None:
        self._create_users(client, 5)

        response = client.get("/users", params={"page": 2, "limit": 2})

        assert [u["username"] for u in response.json()] == ["user2", "user3"]

    def test_listing_never_exposes_passwords(self, client) -> None:
        self._create_users(client, 2)

        for user in client.get("/users").json():
            assert "password" not in user

    def test_page_zero_is_rejected(self, client) -> None:
        assert client.get("/users", params={"page": 0}).status_code == 400
