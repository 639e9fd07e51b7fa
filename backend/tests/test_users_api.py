"""
Users API Backend — /api/users Endpoint Tests
===============================================

What:  HTTP-level tests for the user CRUD routes and their error bodies.
How:   HTTPX AsyncClient over ASGITransport against a fresh app per test.
"""

import pytest

from app.models.user import User
from app.routes.users import parse_user_id
from app.exceptions import NotFoundError


class TestParseUserId:
    """Path segment → integer id."""

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), ("007", 7), ("-3", -3)])
    def test_plain_digits(self, raw, expected):
        assert parse_user_id(raw) == expected

    @pytest.mark.parametrize("raw", ["1_0", " 1", "1 ", "+1", "1.5", "", "abc", "１", "1\n"])
    def test_anything_else_is_not_found(self, raw):
        with pytest.raises(NotFoundError) as exc_info:
            parse_user_id(raw)
        assert exc_info.value.message == "User not found"


class TestListUsers:
    """GET /api/users"""

    @pytest.mark.asyncio
    async def test_list_returns_seed_users(self, test_client):
        response = await test_client.get("/api/users")
        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "name": "John Doe", "email": "john@example.com"},
            {"id": 2, "name": "Jane Smith", "email": "jane@example.com"},
        ]

    @pytest.mark.asyncio
    async def test_list_twice_is_identical(self, test_client):
        first = await test_client.get("/api/users")
        second = await test_client.get("/api/users")
        assert first.json() == second.json()


class TestGetUser:
    """GET /api/users/{id}"""

    @pytest.mark.asyncio
    async def test_get_existing_user(self, test_client):
        response = await test_client.get("/api/users/1")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert body["name"] == "John Doe"
        assert body["email"] == "john@example.com"

    @pytest.mark.asyncio
    async def test_get_missing_user_is_404(self, test_client):
        response = await test_client.get("/api/users/999")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    @pytest.mark.asyncio
    async def test_non_integer_id_is_404(self, test_client):
        response = await test_client.get("/api/users/abc")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("segment", ["1_0", "%201", "1%20", "1.0", "%EF%BC%91"])
    async def test_loosely_numeric_id_is_404(self, store, test_client, segment):
        """Underscores, padding, decimals and non-ASCII digits never resolve to an id."""
        store.append(User(id=10, name="Ten", email="t@example.com"))

        for method in ("get", "delete"):
            response = await getattr(test_client, method)(f"/api/users/{segment}")
            assert response.status_code == 404
            assert response.json() == {"error": "User not found"}

        update = await test_client.put(f"/api/users/{segment}", json={"name": "Changed"})
        assert update.status_code == 404
        assert [u.name for u in store.all()] == ["John Doe", "Jane Smith", "Ten"]


class TestCreateUser:
    """POST /api/users"""

    @pytest.mark.asyncio
    async def test_create_user(self, test_client):
        response = await test_client.post(
            "/api/users", json={"name": "Test User", "email": "test@example.com"}
        )
        assert response.status_code == 201
        assert response.json() == {"id": 3, "name": "Test User", "email": "test@example.com"}

        listing = await test_client.get("/api/users")
        assert listing.json()[-1]["id"] == 3

    @pytest.mark.asyncio
    async def test_client_supplied_id_is_ignored(self, test_client):
        response = await test_client.post(
            "/api/users", json={"id": 50, "name": "Test User", "email": "test@example.com"}
        )
        assert response.status_code == 201
        assert response.json()["id"] == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"name": "Test"},
            {"email": "test@example.com"},
            {},
            {"name": "", "email": "test@example.com"},
        ],
    )
    async def test_create_missing_fields_is_400(self, test_client, body):
        response = await test_client.post("/api/users", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}

        listing = await test_client.get("/api/users")
        assert len(listing.json()) == 2

    @pytest.mark.asyncio
    async def test_create_without_body_is_400(self, test_client):
        response = await test_client.post("/api/users")
        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}


class TestUpdateUser:
    """PUT /api/users/{id}"""

    @pytest.mark.asyncio
    async def test_update_name_only(self, test_client):
        response = await test_client.put("/api/users/1", json={"name": "X"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "X", "email": "john@example.com"}

    @pytest.mark.asyncio
    async def test_update_email_only(self, test_client):
        response = await test_client.put("/api/users/2", json={"email": "js@example.com"})
        assert response.status_code == 200
        assert response.json() == {"id": 2, "name": "Jane Smith", "email": "js@example.com"}

    @pytest.mark.asyncio
    async def test_update_with_empty_body_changes_nothing(self, test_client):
        response = await test_client.put("/api/users/1", json={})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "John Doe", "email": "john@example.com"}

    @pytest.mark.asyncio
    async def test_update_missing_user_is_404(self, test_client):
        response = await test_client.put("/api/users/999", json={"name": "Test"})
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestDeleteUser:
    """DELETE /api/users/{id}"""

    @pytest.mark.asyncio
    async def test_delete_user(self, test_client):
        response = await test_client.delete("/api/users/2")
        assert response.status_code == 204
        assert response.content == b""

        listing = await test_client.get("/api/users")
        assert [u["id"] for u in listing.json()] == [1]

    @pytest.mark.asyncio
    async def test_delete_missing_user_is_404(self, test_client):
        response = await test_client.delete("/api/users/999")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestMalformedRequests:
    """Bodies that cannot be parsed go through the generic 500 envelope."""

    @pytest.mark.asyncio
    async def test_invalid_json_is_500(self, test_client):
        response = await test_client.post(
            "/api/users",
            content=b'{"name": "broken",',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Something went wrong!"
        assert body["message"]

    @pytest.mark.asyncio
    async def test_wrong_field_type_is_500(self, test_client):
        response = await test_client.post("/api/users", json={"name": 5, "email": "a@example.com"})
        assert response.status_code == 500
        assert response.json()["error"] == "Something went wrong!"
        assert "name" in response.json()["message"]


class TestScenario:
    """The end-to-end walk through every operation."""

    @pytest.mark.asyncio
    async def test_full_crud_walk(self, test_client):
        created = await test_client.post(
            "/api/users", json={"name": "Test User", "email": "test@example.com"}
        )
        assert created.status_code == 201
        assert created.json()["id"] == 3

        fetched = await test_client.get("/api/users/1")
        assert fetched.status_code == 200
        assert fetched.json()["id"] == 1

        updated = await test_client.put("/api/users/1", json={"name": "X"})
        assert updated.status_code == 200
        assert updated.json() == {"id": 1, "name": "X", "email": "john@example.com"}

        deleted = await test_client.delete("/api/users/2")
        assert deleted.status_code == 204

        gone = await test_client.get("/api/users/2")
        assert gone.status_code == 404

        missing = await test_client.get("/api/users/999")
        assert missing.status_code == 404
        assert missing.json() == {"error": "User not found"}

        listing = await test_client.get("/api/users")
        assert [u["id"] for u in listing.json()] == [1, 3]
