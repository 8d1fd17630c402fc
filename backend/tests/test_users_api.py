"""
WEB 420 API: Signup / Login Endpoint Tests
==========================================

What:  End-to-end tests of POST /api/signup and POST /api/login through the
       ASGI app, backed by an in-memory SQLite database.

What we test:
    ✅ signup → login round trip
    ✅ duplicate signup is 401 and leaves the first user intact
    ✅ unknown user and wrong password produce identical 401 bodies
    ✅ the password hash never appears in a response
    ✅ request validation (missing fields, over-long passwords)
    ✅ concurrent signups for one username store exactly one user
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from web420.exceptions import DatabaseError, Web420Error
from web420.models.user import User


async def _signup(client, username="alice", password="hunter2", **extra):
    return await client.post(
        "/api/signup", json={"username": username, "password": password, **extra}
    )


class TestSignupEndpoint:

    @pytest.mark.asyncio
    async def test_signup_returns_created_user(self, test_client):
        response = await _signup(
            test_client, emailAddresses=[{"email": "alice@example.com"}]
        )

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alice"
        assert body["emailAddresses"] == [{"email": "alice@example.com"}]
        assert "id" in body
        assert "createdAt" in body

    @pytest.mark.asyncio
    async def test_signup_never_returns_password_or_hash(self, test_client):
        response = await _signup(test_client)

        assert "password" not in response.json()
        assert "hunter2" not in response.text
        assert "$2b$" not in response.text

    @pytest.mark.asyncio
    async def test_signup_accepts_singular_email_address_key(self, test_client):
        response = await _signup(
            test_client, emailAddress=[{"email": "alice@example.com"}]
        )

        assert response.status_code == 200
        assert response.json()["emailAddresses"] == [{"email": "alice@example.com"}]

    @pytest.mark.asyncio
    async def test_signup_without_email_addresses(self, test_client):
        response = await _signup(test_client)

        assert response.status_code == 200
        assert response.json()["emailAddresses"] == []

    @pytest.mark.asyncio
    async def test_duplicate_signup_is_rejected(self, test_client):
        await _signup(test_client, password="hunter2")

        response = await _signup(test_client, password="other")

        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "duplicate_username"
        assert body["message"] == "Username is already in use"

        # The first password still works; the second signup wrote nothing
        login = await test_client.post(
            "/api/login", json={"username": "alice", "password": "hunter2"}
        )
        assert login.status_code == 200

    @pytest.mark.asyncio
    async def test_signup_missing_password_is_422(self, test_client):
        response = await test_client.post("/api/signup", json={"username": "alice"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_signup_empty_username_is_422(self, test_client):
        response = await _signup(test_client, username="")
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_signup_password_over_72_bytes_is_422(self, test_client):
        # 37 two-byte characters → 74 bytes
        response = await _signup(test_client, password="é" * 37)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_signup_password_of_72_bytes_is_accepted(self, test_client):
        response = await _signup(test_client, password="a" * 72)
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_signup_username_longer_than_255_chars(self, test_client):
        username = "u" * 300

        response = await _signup(test_client, username=username)

        assert response.status_code == 200
        assert response.json()["username"] == username
        login = await test_client.post(
            "/api/login", json={"username": username, "password": "hunter2"}
        )
        assert login.status_code == 200

    @pytest.mark.asyncio
    async def test_signup_unclassified_app_error_is_500(self, test_client):
        with patch(
            "web420.routes.users.auth_service.register",
            AsyncMock(side_effect=Web420Error("Something went wrong")),
        ):
            response = await _signup(test_client)

        assert response.status_code == 500
        assert response.json()["error"] == "internal_server_error"

    @pytest.mark.asyncio
    async def test_signup_store_failure_is_501(self, test_client):
        with patch(
            "web420.routes.users.auth_service.register",
            AsyncMock(side_effect=DatabaseError(context={"operation": "insert"})),
        ):
            response = await _signup(test_client)

        assert response.status_code == 501
        body = response.json()
        assert body["error"] == "database_error"
        assert "request_id" in body


class TestLoginEndpoint:

    @pytest.mark.asyncio
    async def test_login_after_signup(self, test_client):
        await _signup(test_client)

        response = await test_client.post(
            "/api/login", json={"username": "alice", "password": "hunter2"}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "User logged in"}

    @pytest.mark.asyncio
    async def test_unknown_user_and_wrong_password_look_the_same(self, test_client):
        await _signup(test_client)

        wrong_password = await test_client.post(
            "/api/login", json={"username": "alice", "password": "wrong"}
        )
        unknown_user = await test_client.post(
            "/api/login", json={"username": "mallory", "password": "hunter2"}
        )

        assert wrong_password.status_code == 401
        assert unknown_user.status_code == 401

        first, second = wrong_password.json(), unknown_user.json()
        first.pop("request_id")
        second.pop("request_id")
        assert first == second == {
            "error": "invalid_credentials",
            "message": "Invalid username and/or password",
        }

    @pytest.mark.asyncio
    async def test_login_store_failure_is_501(self, test_client):
        with patch(
            "web420.services.user_store.UserStore.find_by_username",
            AsyncMock(side_effect=DatabaseError()),
        ):
            response = await test_client.post(
                "/api/login", json={"username": "alice", "password": "hunter2"}
            )

        assert response.status_code == 501

    @pytest.mark.asyncio
    async def test_login_driver_error_text_is_not_leaked(self, test_client):
        with patch(
            "web420.services.user_store.UserStore.find_by_username",
            AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("secret-host:5432"))),
        ):
            response = await test_client.post(
                "/api/login", json={"username": "alice", "password": "hunter2"}
            )

        # An un-translated driver error is wrapped by the service as unexpected
        assert response.status_code == 500
        assert response.json()["error"] == "internal_server_error"
        assert "secret-host" not in response.text

    @pytest.mark.asyncio
    async def test_response_carries_request_id_header(self, test_client):
        response = await test_client.post(
            "/api/login",
            json={"username": "alice", "password": "hunter2"},
            headers={"X-Request-ID": "abc12345"},
        )

        assert response.headers["X-Request-ID"] == "abc12345"
        assert response.json()["request_id"] == "abc12345"


class TestConcurrentSignup:

    @pytest.mark.asyncio
    async def test_concurrent_signups_for_one_username_store_one_user(self, file_test_client):
        client, session_factory = file_test_client

        responses = await asyncio.gather(
            *(_signup(client, username="race", password=f"pw-{i}") for i in range(5))
        )

        assert sorted(r.status_code for r in responses) == [200, 401, 401, 401, 401]
        for rejected in (r for r in responses if r.status_code == 401):
            assert rejected.json()["error"] == "duplicate_username"

        async with session_factory() as session:
            count = await session.scalar(
                select(func.count()).select_from(User).where(User.username == "race")
            )
        assert count == 1
