"""Refresh token row definition."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authsvc.core.database import Base

from .base import CreatedAtMixin, PKMixin, ReprMixin


class RefreshToken(PKMixin, ReprMixin, CreatedAtMixin, Base):
    """
    Server-side record of an issued refresh token.

    Only the SHA-256 digest of the token is stored; a database dump does not
    yield usable tokens.

    Fields
    ------
    token_hash : str
        Hex SHA-256 of the encoded token. Unique.
    user_id : str
        Owner (FK ``users.id``, cascades on delete).
    expires_at : datetime
        Absolute expiration (UTC).
    revoked_at : datetime | None
        Set when the token is consumed by a refresh or revoked.
    """

    __tablename__ = "refresh_tokens"

    token_hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    user_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    revoked_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="refresh_tokens")

    __table_args__ = (Index("ix_refresh_tokens_user_id", "user_id"),)
