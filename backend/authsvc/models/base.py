"""Reusable SQLAlchemy mixins shared by ORM models (typed 2.0)."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column


def _new_id() -> str:
    return uuid4().hex


class PKMixin:
    """Expose a string surrogate primary key column named ``id``.

    Attributes
    ----------
    id:
        32-char hex UUID generated client-side on insert.
    """

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)


class CreatedAtMixin:
    """Provide a ``created_at`` timestamp column filled by the database."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class ReprMixin:
    """Provide a concise ``__repr__`` including the class name and id."""

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        key = getattr(self, "id", None)
        return f"<{cls} id={key}>"
