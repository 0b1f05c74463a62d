"""User row definition."""

from __future__ import annotations

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authsvc.core.database import Base

from .base import CreatedAtMixin, PKMixin, ReprMixin


class User(PKMixin, ReprMixin, CreatedAtMixin, Base):
    """
    Authentication identity.

    Fields
    ------
    email : str
        Login email, stored exactly as registered (lookups are case-sensitive).
    password_hash : str
        One-way hash produced by the password hasher. Never the plaintext.
    created_at : datetime
        Creation timestamp (from mixin).
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(254), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    refresh_tokens = relationship(
        "RefreshToken",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)
