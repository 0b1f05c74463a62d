"""Service layer public API.

Callers can import from :mod:`authsvc.services` without knowing the internal
structure.

Re-exports
----------
- Auth service (from ``authsvc.services.auth``)
    * :class:`AuthService`
    * DTOs: :class:`RegisterIn`, :class:`LoginIn`, :class:`RefreshIn`,
      :class:`TokenPairOut`, :class:`AuthTokenConfig`

- Errors (from ``authsvc.services._shared.errors``)
    * :class:`ServiceError`, :class:`ConflictError`,
      :class:`UnauthorizedError`, :class:`ConfigurationError`
"""

from __future__ import annotations

from ._shared.errors import (
    ConfigurationError,
    ConflictError,
    ServiceError,
    UnauthorizedError,
)
from .auth.dto import AuthTokenConfig, LoginIn, RefreshIn, RegisterIn, TokenPairOut
from .auth.service import AuthService

__all__ = [
    # Auth
    "AuthService",
    "AuthTokenConfig",
    "RegisterIn",
    "LoginIn",
    "RefreshIn",
    "TokenPairOut",
    # Errors
    "ServiceError",
    "ConflictError",
    "UnauthorizedError",
    "ConfigurationError",
]
