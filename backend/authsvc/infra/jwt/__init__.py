"""PyJWT-backed token provider."""

from __future__ import annotations

from .pyjwt_token_provider import JWTTokenProvider

__all__ = ["JWTTokenProvider"]
