from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Protocol

from authsvc.services._shared.errors import UnauthorizedError

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class TokenKind(str, Enum):
    """Discriminator embedded in every token as the ``type`` claim."""

    ACCESS = "access"
    REFRESH = "refresh"


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """
    Decoded claims of a verified token.

    :ivar user_id: Owner user id (``sub`` claim).
    :ivar kind: Access or refresh.
    :ivar issued_at: ``iat`` as an aware UTC datetime.
    :ivar expires_at: ``exp`` as an aware UTC datetime.
    :ivar jti: Unique token identifier.
    """

    user_id: str
    kind: TokenKind
    issued_at: datetime
    expires_at: datetime
    jti: str


class TokenProvider(Protocol):
    """Port for minting and verifying signed tokens."""

    def issue(self, user_id: str, kind: TokenKind) -> str:
        """Sign a new token of ``kind`` for ``user_id``."""
        ...

    def verify(self, token: str, kind: TokenKind) -> TokenPayload:
        """
        Check signature, expiry and kind.

        :raises UnauthorizedError: On any invalid, malformed or expired token.
        """
        ...


class StubTokenProvider(TokenProvider):
    """Deterministic token provider used in unit tests."""

    def __init__(
        self,
        *,
        access_expires: timedelta = timedelta(minutes=15),
        refresh_expires: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))
        self._lifetimes = {TokenKind.ACCESS: access_expires, TokenKind.REFRESH: refresh_expires}
        self._seq = 0
        self._issued: dict[str, TokenPayload] = {}

    def issue(self, user_id: str, kind: TokenKind) -> str:
        self._seq += 1
        jti = f"jti-{self._seq}"
        now = self._clock()
        token = f"{kind.value}.{user_id}.{jti}"
        self._issued[token] = TokenPayload(
            user_id=user_id,
            kind=kind,
            issued_at=now,
            expires_at=now + self._lifetimes[kind],
            jti=jti,
        )
        return token

    def verify(self, token: str, kind: TokenKind) -> TokenPayload:
        payload = self._issued.get(token)
        if payload is None or payload.kind is not kind:
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
        if payload.expires_at <= self._clock():
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
        return payload
