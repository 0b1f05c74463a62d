"""ORM models registered on :data:`authsvc.core.database.Base.metadata`."""

from __future__ import annotations

from .refresh_token import RefreshToken
from .user import User

__all__ = ["RefreshToken", "User"]
