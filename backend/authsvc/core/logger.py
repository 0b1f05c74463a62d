"""JSON logging for the auth service, correlated by request id.

Credential material never reaches the log stream: any ``extra`` key listed in
:data:`REDACTED_KEYS` is masked by :class:`JSONFormatter`, and service code
only logs user ids.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, g, has_request_context, request

SERVICE_NAME = "authsvc"
REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = (REQUEST_ID_HEADER, "X-Correlation-ID")

# Inbound ids are echoed into logs and headers, so only plain tokens are trusted.
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

# Attributes copied from ``extra={...}`` into the JSON payload when present.
EXTRA_KEYS = ("endpoint", "elapsed_ms", "user_id", "method", "path", "status")
REDACTED_KEYS = frozenset({"email", "password", "token", "access_token", "refresh_token"})
REDACTED = "[redacted]"


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "service": SERVICE_NAME,
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        for key in REDACTED_KEYS:
            if hasattr(record, key):
                payload[key] = REDACTED
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Stamp the current request id (or ``None``) on every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def _inbound_request_id() -> str | None:
    for header in CORRELATION_HEADERS:
        value = request.headers.get(header, "").strip()
        if _SAFE_REQUEST_ID.match(value):
            return value
    return None


def ensure_request_id() -> str:
    """Return the current request id, adopting a safe inbound one or minting one."""

    if not has_request_context():
        return uuid4().hex
    if "request_id" not in g:
        g.request_id = _inbound_request_id() or uuid4().hex
    return g.request_id


def configure_logging(level: str | int = "INFO") -> None:
    """Route the root logger to stdout as JSON at ``level``."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)


def init_app(app: Flask) -> None:
    """Seed the request id, echo it on responses and log each completed request."""

    app.logger.addFilter(RequestIdFilter())
    access_log = logging.getLogger(f"{SERVICE_NAME}.access")

    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _finish_request(response):
        response.headers[REQUEST_ID_HEADER] = ensure_request_id()
        access_log.info(
            "http.request",
            extra={
                "endpoint": request.endpoint,
                "method": request.method,
                "path": request.path,
                "status": response.status_code,
            },
        )
        return response


__all__ = [
    "JSONFormatter",
    "REQUEST_ID_HEADER",
    "RequestIdFilter",
    "configure_logging",
    "ensure_request_id",
    "init_app",
]
