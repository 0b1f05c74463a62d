"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, jsonify, request

from authsvc.services.auth.service import AuthService

F = TypeVar("F", bound=Callable[..., Any])

AUTH_SERVICE_KEY = "auth_service"


def get_auth_service() -> AuthService:
    """Return the :class:`AuthService` built once by the app factory."""

    return cast(AuthService, current_app.extensions[AUTH_SERVICE_KEY])


def json_body() -> dict[str, Any]:
    """Return the JSON request body, or an empty dict when absent/invalid."""

    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
