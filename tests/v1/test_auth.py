# tests/v1/test_auth.py
"""Tests for authentication endpoints."""

from __future__ import annotations

from fastapi import status

from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME


def _signup(client, username="alice", password="secret1", **extra):
    return client.post(
        "/api/v1/auth/signup",
        json={"username": username, "password": password, **extra},
    )


def test_signup_login_me_scenario(client) -> None:
    response = _signup(client)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["user"]["username"] == "alice"

    client.cookies.clear()
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "alice", "password": "secret1"},
    )
    assert response.status_code == status.HTTP_200_OK
    assert "session" in response.cookies

    me = client.get("/api/v1/auth/me")
    assert me.status_code == status.HTTP_200_OK
    user = me.json()["user"]
    assert user["username"] == "alice"
    assert user["role"] == "user"


def test_signup_sets_session_cookie_and_display_name(client) -> None:
    response = _signup(client, displayName="  Alice A.  ")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "ok": True,
        "user": {"username": "alice", "role": "user", "displayName": "Alice A."},
    }
    set_cookie = response.headers["set-cookie"].lower()
    assert "session=" in set_cookie
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie
    assert "max-age=604800" in set_cookie


def test_signup_validation_errors(client) -> None:
    response = _signup(client, username="al")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Username must be at least 3 characters"

    response = _signup(client, password="12345")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Password must be at least 6 characters"


def test_signup_missing_fields(client) -> None:
    response = client.post("/api/v1/auth/signup", json={"username": "alice"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "password" in response.json()["error"]


def test_signup_duplicate_username(client) -> None:
    assert _signup(client).status_code == status.HTTP_200_OK
    response = _signup(client, password="different1")
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["error"] == "Username is already taken"


def test_signup_with_bootstrap_username_conflicts(client) -> None:
    response = _signup(client, username=ADMIN_USERNAME)
    assert response.status_code == status.HTTP_409_CONFLICT


def test_login_wrong_password_matches_unknown_user(client) -> None:
    _signup(client)
    client.cookies.clear()

    wrong_password = client.post(
        "/api/v1/auth/login", json={"username": "alice", "password": "nope-nope"}
    )
    unknown_user = client.post(
        "/api/v1/auth/login", json={"username": "mallory", "password": "secret1"}
    )

    assert wrong_password.status_code == unknown_user.status_code == status.HTTP_401_UNAUTHORIZED
    assert wrong_password.json() == unknown_user.json() == {"error": "Invalid credentials"}
    assert "session" not in wrong_password.cookies


def test_login_requires_username_and_password(client) -> None:
    response = client.post("/api/v1/auth/login", json={"username": "  ", "password": "x"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_login_bootstrap_superadmin(client) -> None:
    response = client.post(
        "/api/v1/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["user"] == {
        "username": ADMIN_USERNAME,
        "role": "superadmin",
        "displayName": "City Admin",
    }


def test_me_anonymous(client) -> None:
    response = client.get("/api/v1/auth/me")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"user": None}


def test_logout_clears_cookie(client) -> None:
    _signup(client)
    response = client.post("/api/v1/auth/logout")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"ok": True}
    assert "max-age=0" in response.headers["set-cookie"].lower()

    assert client.get("/api/v1/auth/me").json() == {"user": None}
