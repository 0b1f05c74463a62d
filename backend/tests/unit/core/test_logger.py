"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from authsvc.core.logger import JSONFormatter, configure_logging


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    # Act
    configure_logging("DEBUG")

    # Assert
    assert logging.getLogger().level == logging.DEBUG


def test_json_formatter_includes_user_id_extra() -> None:
    record = logging.LogRecord(
        name="authsvc.services.auth.service",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="auth.login",
        args=(),
        exc_info=None,
    )
    record.user_id = "abc123"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "auth.login"
    assert payload["level"] == "INFO"
    assert payload["user_id"] == "abc123"
    assert "endpoint" not in payload


def test_json_formatter_redacts_credential_extras() -> None:
    record = logging.LogRecord(
        name="authsvc",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="auth.debug",
        args=(),
        exc_info=None,
    )
    record.email = "alice@example.com"
    record.refresh_token = "eyJhbGciOi..."

    raw = JSONFormatter().format(record)
    payload = json.loads(raw)

    assert payload["email"] == "[redacted]"
    assert payload["refresh_token"] == "[redacted]"
    assert payload["service"] == "authsvc"
    assert "alice@example.com" not in raw


def test_unsafe_inbound_request_id_is_replaced(client) -> None:
    resp = client.get("/api/v1/health", headers={"X-Request-ID": "evil id value"})

    assert resp.headers["X-Request-ID"] != "evil id value"
    assert len(resp.headers["X-Request-ID"]) == 32


def test_correlation_header_is_adopted(client) -> None:
    resp = client.get("/api/v1/health", headers={"X-Correlation-ID": "corr-7"})

    assert resp.headers["X-Request-ID"] == "corr-7"
