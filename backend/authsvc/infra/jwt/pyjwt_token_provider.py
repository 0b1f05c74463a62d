# authsvc/infra/jwt/pyjwt_token_provider.py
from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import jwt

from authsvc.services._shared.errors import UnauthorizedError
from authsvc.services._shared.ports import (
    INVALID_TOKEN_MESSAGE,
    TokenKind,
    TokenPayload,
    TokenProvider,
)
from authsvc.services.auth.dto import AuthTokenConfig

REQUIRED_CLAIMS = ("sub", "type", "iat", "exp", "jti")


class JWTTokenProvider(TokenProvider):
    """
    Adapter for PyJWT issuing HS256 tokens.

    Access and refresh tokens are signed with *different* secrets, so a
    token of one kind never verifies as the other even if the ``type``
    claim were tampered with.
    """

    def __init__(
        self,
        config: AuthTokenConfig,
        *,
        clock: Callable[[], datetime] | None = None,
        jti_factory: Callable[[], str] | None = None,
    ) -> None:
        """
        :param config: Secrets and lifetimes; validated here.
        :param clock: Returns an aware UTC "now" (injectable for tests).
        :param jti_factory: Returns a unique token id (uuid4 hex by default).
        :raises ConfigurationError: If a signing secret is missing.
        """
        config.require_secrets()
        self.cfg = config
        self._clock = clock or (lambda: datetime.now(UTC))
        self._jti_factory = jti_factory or (lambda: uuid4().hex)

    # ------------------------- helpers -------------------------

    def _secret_for(self, kind: TokenKind) -> str:
        secret = self.cfg.access_secret if kind is TokenKind.ACCESS else self.cfg.refresh_secret
        # require_secrets() ran in __init__, so this is always a non-empty str
        return str(secret)

    def _lifetime_for(self, kind: TokenKind) -> timedelta:
        return self.cfg.access_expires if kind is TokenKind.ACCESS else self.cfg.refresh_expires

    @staticmethod
    def _ts(dt: datetime) -> int:
        return int(dt.timestamp())

    # -------------------------- API ----------------------------

    def issue(self, user_id: str, kind: TokenKind) -> str:
        now = self._clock()
        claims: dict[str, Any] = {
            "sub": str(user_id),
            "type": kind.value,
            "iat": self._ts(now),
            "exp": self._ts(now + self._lifetime_for(kind)),
            "jti": self._jti_factory(),
        }
        return jwt.encode(claims, self._secret_for(kind), algorithm=self.cfg.algorithm)

    def verify(self, token: str, kind: TokenKind) -> TokenPayload:
        try:
            claims = jwt.decode(
                token,
                self._secret_for(kind),
                algorithms=[self.cfg.algorithm],
                # Time claims are checked below against self._clock
                options={
                    "require": list(REQUIRED_CLAIMS),
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            # Signature, malformed input and missing claims all land here.
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE) from exc

        if claims.get("type") != kind.value:
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        try:
            issued_at, expires_at = int(claims["iat"]), int(claims["exp"])
        except (TypeError, ValueError) as exc:
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE) from exc
        if expires_at <= self._ts(self._clock()):
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        return TokenPayload(
            user_id=str(claims["sub"]),
            kind=kind,
            issued_at=datetime.fromtimestamp(issued_at, tz=UTC),
            expires_at=datetime.fromtimestamp(expires_at, tz=UTC),
            jti=str(claims["jti"]),
        )
