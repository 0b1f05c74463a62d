"""HTTP tests for the authentication endpoints."""

from __future__ import annotations

import pytest
from authsvc import create_app
from authsvc.core.config import TestingConfig
from authsvc.services._shared.errors import ConfigurationError

BASE = "/api/v1/auth"
CREDS = {"email": "user@example.com", "password": "secret123"}


def test_register_returns_token_pair(client) -> None:
    resp = client.post(f"{BASE}/register", json=CREDS)

    assert resp.status_code == 201
    body = resp.get_json()
    assert set(body) == {"accessToken", "refreshToken"}


def test_register_duplicate_is_409_problem(client) -> None:
    client.post(f"{BASE}/register", json=CREDS)

    resp = client.post(f"{BASE}/register", json=CREDS)

    assert resp.status_code == 409
    assert resp.mimetype == "application/problem+json"
    body = resp.get_json()
    assert body["detail"] == "User already exists"
    assert body["status"] == 409
    assert body["code"] == "conflict"


def test_register_then_login(client) -> None:
    client.post(f"{BASE}/register", json=CREDS)

    resp = client.post(f"{BASE}/login", json=CREDS)

    assert resp.status_code == 200
    assert "accessToken" in resp.get_json()


def test_login_failures_are_identical(client) -> None:
    client.post(f"{BASE}/register", json=CREDS)

    wrong = client.post(f"{BASE}/login", json={**CREDS, "password": "wrong-password"})
    unknown = client.post(f"{BASE}/login", json={**CREDS, "email": "ghost@example.com"})

    assert wrong.status_code == unknown.status_code == 401
    keys = ("detail", "status", "code", "title")
    assert {k: wrong.get_json()[k] for k in keys} == {k: unknown.get_json()[k] for k in keys}


def test_refresh_rotates_and_rejects_replay(client) -> None:
    tokens = client.post(f"{BASE}/register", json=CREDS).get_json()

    first = client.post(f"{BASE}/refresh", json={"refreshToken": tokens["refreshToken"]})
    replay = client.post(f"{BASE}/refresh", json={"refreshToken": tokens["refreshToken"]})

    assert first.status_code == 200
    assert first.get_json()["refreshToken"] != tokens["refreshToken"]
    assert replay.status_code == 401


def test_refresh_with_garbage_is_401(client) -> None:
    resp = client.post(f"{BASE}/refresh", json={"refreshToken": "garbage"})

    assert resp.status_code == 401


@pytest.mark.parametrize(
    "path, payload",
    [
        ("register", {"email": "not-an-email", "password": "secret123"}),
        ("register", {"email": "user@example.com", "password": "short"}),
        ("login", {"email": "user@example.com"}),
        ("refresh", {}),
    ],
)
def test_invalid_bodies_are_422(client, path, payload) -> None:
    resp = client.post(f"{BASE}/{path}", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["code"] == "validation_error"


def test_multibyte_password_registers_and_logs_in(client) -> None:
    creds = {"email": "mb@example.com", "password": "é" * 36}  # 72 UTF-8 bytes

    registered = client.post(f"{BASE}/register", json=creds)
    logged_in = client.post(f"{BASE}/login", json=creds)

    assert registered.status_code == 201
    assert logged_in.status_code == 200


@pytest.mark.parametrize("path", ["register", "login"])
def test_password_over_72_bytes_is_422(client, path) -> None:
    payload = {"email": "mb@example.com", "password": "é" * 40}

    resp = client.post(f"{BASE}/{path}", json=payload)

    assert resp.status_code == 422
    assert "password" in resp.get_json()["details"]["errors"]


def test_store_failure_is_generic_500(client, store, monkeypatch) -> None:
    def _boom(email: str):
        raise RuntimeError("connection reset by peer at 10.0.0.5")

    monkeypatch.setattr(store, "find_user_by_email", _boom)

    resp = client.post(f"{BASE}/login", json=CREDS)

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["detail"] == "Unexpected error"
    assert "10.0.0.5" not in resp.get_data(as_text=True)


def test_responses_carry_request_id_and_security_headers(client) -> None:
    resp = client.post(f"{BASE}/login", json=CREDS, headers={"X-Request-ID": "req-1"})

    assert resp.headers["X-Request-ID"] == "req-1"
    assert resp.get_json()["request_id"] == "req-1"
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_health_reports_database(client) -> None:
    resp = client.get("/api/v1/health")

    assert resp.status_code == 200
    assert resp.get_json()["db"] == "ok"


def test_unknown_route_is_404_problem(client) -> None:
    resp = client.get("/api/v1/nope")

    assert resp.status_code == 404
    assert resp.mimetype == "application/problem+json"


def test_app_refuses_to_start_without_secrets(store) -> None:
    class NoSecrets(TestingConfig):
        JWT_SECRET = None
        JWT_REFRESH_SECRET = None

    with pytest.raises(ConfigurationError, match="JWT secrets are not defined"):
        create_app(NoSecrets, store=store)


def test_app_uses_sql_store_by_default() -> None:
    app = create_app(TestingConfig)
    client = app.test_client()

    assert client.post(f"{BASE}/register", json=CREDS).status_code == 201
    assert client.post(f"{BASE}/login", json=CREDS).status_code == 200
