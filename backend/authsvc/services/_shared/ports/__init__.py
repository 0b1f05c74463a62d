"""
authsvc.services._shared.ports
==============================

Collection of *ports* (hexagonal interfaces) the auth service depends on.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`: minting and verifying signed tokens,
    plus :class:`~.TokenKind` and :class:`~.TokenPayload`.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`: one-way password hashing.

- :mod:`credential_store`:
    Defines :class:`~.CredentialStore`: users and refresh-token records,
    with an in-memory implementation.

Concrete adapters live under ``authsvc.infra``. The stubs exported here are
deterministic test doubles.
"""

from __future__ import annotations

from .credential_store import (
    CredentialStore,
    DuplicateEmailError,
    InMemoryCredentialStore,
    RefreshTokenRecord,
    StoreError,
    UserRecord,
)
from .password_hasher import PasswordHasher, StubPasswordHasher
from .token_provider import (
    INVALID_TOKEN_MESSAGE,
    StubTokenProvider,
    TokenKind,
    TokenPayload,
    TokenProvider,
)

__all__ = [
    "CredentialStore",
    "DuplicateEmailError",
    "InMemoryCredentialStore",
    "RefreshTokenRecord",
    "StoreError",
    "UserRecord",
    "PasswordHasher",
    "StubPasswordHasher",
    "INVALID_TOKEN_MESSAGE",
    "StubTokenProvider",
    "TokenKind",
    "TokenPayload",
    "TokenProvider",
]
