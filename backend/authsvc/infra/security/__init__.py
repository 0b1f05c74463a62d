"""Password hashing adapters."""

from __future__ import annotations

from .bcrypt_password_hasher import BCRYPT_MAX_BYTES, BCRYPT_ROUNDS, BcryptPasswordHasher

__all__ = ["BCRYPT_MAX_BYTES", "BCRYPT_ROUNDS", "BcryptPasswordHasher"]
