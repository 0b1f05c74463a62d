from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4


class StoreError(Exception):
    """Generic persistence failure raised by credential store adapters."""


class DuplicateEmailError(StoreError):
    """Unique constraint on ``users.email`` violated."""


@dataclass(frozen=True, slots=True)
class UserRecord:
    """
    Read-model for a user identity.

    :ivar id: Surrogate identifier.
    :ivar email: Unique email, case-sensitive as stored.
    :ivar password_hash: One-way password hash; never the plaintext.
    :ivar created_at: Creation timestamp (UTC).
    """

    id: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class RefreshTokenRecord:
    """
    Persisted proof that a refresh token was issued.

    :ivar id: Surrogate identifier.
    :ivar user_id: Owner user id.
    :ivar token: Token string (or an opaque reference to it).
    :ivar created_at: Issuance timestamp (UTC).
    :ivar expires_at: Absolute expiration (UTC).
    :ivar revoked_at: Revocation timestamp, ``None`` while live.
    """

    id: str
    user_id: str
    token: str
    created_at: datetime
    expires_at: datetime
    revoked_at: datetime | None = None

    def is_live(self, now: datetime) -> bool:
        """Return ``True`` when neither revoked nor expired at ``now``."""
        return self.revoked_at is None and self.expires_at > now


class CredentialStore(Protocol):
    """
    The whole persistence contract the auth service needs.

    Any operation may raise a store-specific error; callers do not interpret
    it. Email uniqueness is enforced by the store itself.
    """

    def find_user_by_email(self, email: str) -> UserRecord | None:
        """Exact (case-sensitive) email lookup."""
        ...

    def create_user(self, email: str, password_hash: str) -> UserRecord:
        """
        Insert a new user.

        :raises StoreError: When the email already exists (or any other failure).
        """
        ...

    def create_refresh_token(
        self, user_id: str, token: str, *, expires_at: datetime
    ) -> RefreshTokenRecord:
        """Record an issued refresh token."""
        ...

    def find_live_refresh_token(self, token: str) -> RefreshTokenRecord | None:
        """Return the record for ``token`` unless revoked or expired."""
        ...

    def revoke_refresh_token(self, token: str) -> None:
        """Mark ``token`` revoked. Unknown tokens are a no-op."""
        ...


class InMemoryCredentialStore(CredentialStore):
    """
    Dict-backed credential store.

    .. note::
       Uses a threading lock so uniqueness holds under concurrent requests.
       Create one instance per test case.
    """

    def __init__(self, *, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))
        self._users_by_email: dict[str, UserRecord] = {}
        self._tokens: dict[str, RefreshTokenRecord] = {}
        self._lock = threading.Lock()

    # -------------------------- users --------------------------

    def find_user_by_email(self, email: str) -> UserRecord | None:
        with self._lock:
            return self._users_by_email.get(email)

    def create_user(self, email: str, password_hash: str) -> UserRecord:
        with self._lock:
            if email in self._users_by_email:
                raise DuplicateEmailError(f"unique constraint violated: users.email={email!r}")
            user = UserRecord(
                id=uuid4().hex,
                email=email,
                password_hash=password_hash,
                created_at=self._clock(),
            )
            self._users_by_email[email] = user
            return user

    # ---------------------- refresh tokens ---------------------

    def create_refresh_token(
        self, user_id: str, token: str, *, expires_at: datetime
    ) -> RefreshTokenRecord:
        with self._lock:
            if token in self._tokens:
                raise StoreError("unique constraint violated: refresh_tokens.token")
            record = RefreshTokenRecord(
                id=uuid4().hex,
                user_id=user_id,
                token=token,
                created_at=self._clock(),
                expires_at=expires_at,
            )
            self._tokens[token] = record
            return record

    def find_live_refresh_token(self, token: str) -> RefreshTokenRecord | None:
        with self._lock:
            record = self._tokens.get(token)
        if record is None or not record.is_live(self._clock()):
            return None
        return record

    def revoke_refresh_token(self, token: str) -> None:
        with self._lock:
            record = self._tokens.get(token)
            if record is not None and record.revoked_at is None:
                self._tokens[token] = replace(record, revoked_at=self._clock())

    # ------------------------ inspection -----------------------

    def users(self) -> list[UserRecord]:
        """Snapshot of all stored users."""
        with self._lock:
            return list(self._users_by_email.values())

    def refresh_tokens(self) -> list[RefreshTokenRecord]:
        """Snapshot of all refresh token records, revoked included."""
        with self._lock:
            return list(self._tokens.values())
