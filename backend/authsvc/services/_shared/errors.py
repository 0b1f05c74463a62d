"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or SQLAlchemy directly. They carry a stable ``message``/``status_code``
pair so the HTTP layer (``authsvc/core/errors.py``) can map them 1:1.

Store and hashing failures are *not* expressed here: they propagate as raised
by the infrastructure so an upstream layer can log them in full.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

CONFIG_SECRETS_MISSING = "JWT secrets are not defined in environment variables"


class ConfigurationError(RuntimeError):
    """
    Fatal startup error raised when signing material is missing.

    This is deliberately **not** a :class:`ServiceError`: the process must not
    serve traffic at all.
    """

    def __init__(self, message: str = CONFIG_SECRETS_MISSING) -> None:
        super().__init__(message)
        self.message = message


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all expected, user-facing service failures.

    :param message: Human-readable message, safe to show to clients.
    :type message: str
    :param status_code: HTTP-style status code. Defaults to the class value.
    :type status_code: int | None
    """

    default_status: int = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code if status_code is not None else self.default_status)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{message, statusCode}`` error shape."""
        return {"message": self.message, "statusCode": self.status_code}

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code})"


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class ConflictError(ServiceError):
    """Raised when a uniqueness rule is violated (e.g. email taken)."""

    default_status = HTTPStatus.CONFLICT


class UnauthorizedError(ServiceError):
    """
    Raised for invalid credentials and invalid, expired or revoked tokens.

    Messages are uniform per operation so callers cannot tell sub-causes apart.
    """

    default_status = HTTPStatus.UNAUTHORIZED
