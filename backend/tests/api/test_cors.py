"""CORS behavior on the auth endpoints."""

from __future__ import annotations

import pytest
from authsvc import create_app
from authsvc.core.config import TestingConfig
from flask.testing import FlaskClient

ORIGIN = "https://app.example"
LOGIN = "/api/v1/auth/login"
CREDS = {"email": "user@example.com", "password": "secret123"}


class CorsConfig(TestingConfig):
    CORS_ORIGINS = f"{ORIGIN}, https://admin.example"


@pytest.fixture()
def cors_client(store) -> FlaskClient:
    return create_app(CorsConfig, store=store).test_client()


def test_listed_origin_is_allowed_and_request_id_exposed(cors_client) -> None:
    resp = cors_client.post(LOGIN, json=CREDS, headers={"Origin": ORIGIN})

    assert resp.headers["Access-Control-Allow-Origin"] == ORIGIN
    assert "X-Request-ID" in resp.headers["Access-Control-Expose-Headers"]
    assert "Access-Control-Allow-Credentials" not in resp.headers


def test_preflight_on_refresh(cors_client) -> None:
    resp = cors_client.options(
        "/api/v1/auth/refresh",
        headers={
            "Origin": ORIGIN,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == ORIGIN
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]


def test_unlisted_origin_gets_no_cors_headers(cors_client) -> None:
    resp = cors_client.post(LOGIN, json=CREDS, headers={"Origin": "https://evil.example"})

    assert "Access-Control-Allow-Origin" not in resp.headers


def test_wildcard_origins(store) -> None:
    class OpenConfig(TestingConfig):
        CORS_ORIGINS = "*"

    client = create_app(OpenConfig, store=store).test_client()

    resp = client.post(LOGIN, json=CREDS, headers={"Origin": "https://anywhere.example"})

    assert resp.headers["Access-Control-Allow-Origin"] == "https://anywhere.example"
