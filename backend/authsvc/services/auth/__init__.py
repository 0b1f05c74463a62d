"""Authentication lifecycle service and its DTOs."""

from __future__ import annotations

from .dto import AuthTokenConfig, LoginIn, RefreshIn, RegisterIn, TokenPairOut
from .service import AuthService

__all__ = [
    "AuthService",
    "AuthTokenConfig",
    "LoginIn",
    "RefreshIn",
    "RegisterIn",
    "TokenPairOut",
]
