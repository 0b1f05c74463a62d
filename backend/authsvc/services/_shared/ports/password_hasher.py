from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """Port for one-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """Return a one-way hash of ``plaintext``."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return ``True`` iff ``plaintext`` matches ``hashed``. Never raises on mismatch."""
        ...


class StubPasswordHasher(PasswordHasher):
    """Reversible, crypto-free hasher used in unit tests."""

    prefix = "hashed:"

    def __init__(self) -> None:
        self.hash_calls: list[str] = []
        self.verify_calls = 0

    def hash(self, plaintext: str) -> str:
        self.hash_calls.append(plaintext)
        return f"{self.prefix}{plaintext}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"{self.prefix}{plaintext}"
