# authsvc/infra/sqlalchemy/sqlalchemy_credential_store.py
"""
SQLAlchemy implementation of :class:`CredentialStore`.

Each operation runs in its own short transaction. Database errors
(``IntegrityError`` on a duplicate email included) are not caught here: the
service layer pre-checks existence and anything else is an infrastructure
failure for the global error layer.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import select, update
from sqlalchemy.orm import Session, sessionmaker

from authsvc.models import RefreshToken, User
from authsvc.services._shared.ports import CredentialStore, RefreshTokenRecord, UserRecord


def token_digest(token: str) -> str:
    """Return the hex SHA-256 used as the stored reference for ``token``."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _aware(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes; every value we write is UTC.
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=UTC)


class SQLAlchemyCredentialStore(CredentialStore):
    """Credential store over the ``users`` and ``refresh_tokens`` tables."""

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._sessions = session_factory
        self._clock = clock or (lambda: datetime.now(UTC))

    # ------------------------- mappers -------------------------

    @staticmethod
    def _to_user(row: User) -> UserRecord:
        return UserRecord(
            id=row.id,
            email=row.email,
            password_hash=row.password_hash,
            created_at=_aware(row.created_at),
        )

    @staticmethod
    def _to_refresh(row: RefreshToken, token: str) -> RefreshTokenRecord:
        return RefreshTokenRecord(
            id=row.id,
            user_id=row.user_id,
            token=token,
            created_at=_aware(row.created_at),
            expires_at=_aware(row.expires_at),
            revoked_at=_aware(row.revoked_at) if row.revoked_at is not None else None,
        )

    # -------------------------- users --------------------------

    def find_user_by_email(self, email: str) -> UserRecord | None:
        with self._sessions() as session:
            row = session.execute(select(User).where(User.email == email)).scalars().first()
            return self._to_user(row) if row is not None else None

    def create_user(self, email: str, password_hash: str) -> UserRecord:
        with self._sessions.begin() as session:
            row = User(email=email, password_hash=password_hash, created_at=self._clock())
            session.add(row)
            session.flush()
            return self._to_user(row)

    # ---------------------- refresh tokens ---------------------

    def create_refresh_token(
        self, user_id: str, token: str, *, expires_at: datetime
    ) -> RefreshTokenRecord:
        with self._sessions.begin() as session:
            row = RefreshToken(
                token_hash=token_digest(token),
                user_id=user_id,
                expires_at=expires_at,
                created_at=self._clock(),
            )
            session.add(row)
            session.flush()
            return self._to_refresh(row, token)

    def find_live_refresh_token(self, token: str) -> RefreshTokenRecord | None:
        stmt = select(RefreshToken).where(
            RefreshToken.token_hash == token_digest(token),
            RefreshToken.revoked_at.is_(None),
            RefreshToken.expires_at > self._clock(),
        )
        with self._sessions() as session:
            row = session.execute(stmt).scalars().first()
            return self._to_refresh(row, token) if row is not None else None

    def revoke_refresh_token(self, token: str) -> None:
        stmt = (
            update(RefreshToken)
            .where(
                RefreshToken.token_hash == token_digest(token),
                RefreshToken.revoked_at.is_(None),
            )
            .values(revoked_at=self._clock())
        )
        with self._sessions.begin() as session:
            session.execute(stmt)
