"""CORS policy for the auth endpoints."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from authsvc.core.logger import REQUEST_ID_HEADER

# Token endpoints only ever receive JSON bodies
ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", REQUEST_ID_HEADER]


def parse_origins(raw: str | None) -> list[str]:
    """Split a comma-separated ``CORS_ORIGINS`` value, dropping blanks."""
    return [o.strip() for o in (raw or "").split(",") if o.strip()]


def init_app(app: Flask) -> None:
    """Apply CORS to everything under ``API_BASE_PREFIX``.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``API_BASE_PREFIX``, ``CORS_ORIGINS`` and
        ``CORS_MAX_AGE`` settings are consulted.

    Notes
    -----
    Tokens travel in JSON bodies, never cookies, so credentials are never
    allowed. A blank or ``"*"`` origin list opens the API to any origin.
    The request-id header is exposed so browser clients can report it.
    """
    origins = parse_origins(app.config.get("CORS_ORIGINS"))
    api_prefix = app.config.get("API_BASE_PREFIX", "/api").rstrip("/")

    CORS(
        app,
        resources={
            rf"{api_prefix}/*": {"origins": "*" if origins in ([], ["*"]) else origins}
        },
        methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
        expose_headers=[REQUEST_ID_HEADER],
        supports_credentials=False,
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
