# authsvc/infra/security/bcrypt_password_hasher.py
from __future__ import annotations

from dataclasses import dataclass

import bcrypt

from authsvc.services._shared.ports import PasswordHasher

# Fixed work factor; changing it changes login latency for every account.
BCRYPT_ROUNDS = 4
# bcrypt only keys on this many bytes of input.
BCRYPT_MAX_BYTES = 72


def _secret_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


@dataclass(frozen=True, slots=True)
class BcryptPasswordHasher(PasswordHasher):
    """
    Adapter for the ``bcrypt`` library.

    .. note::
       Passwords are encoded as UTF-8 and cut to the first 72 bytes before
       hashing and verifying. Older bcrypt releases did this silently and
       newer ones raise ``ValueError`` instead, so the cut keeps :meth:`hash`
       from failing on long multi-byte input.
    """

    rounds: int = BCRYPT_ROUNDS

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_secret_bytes(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_secret_bytes(plaintext), hashed.encode("utf-8"))
        except ValueError:
            # Malformed stored hash: a non-match, not a crash.
            return False
