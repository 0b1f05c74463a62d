"""SQLAlchemy-backed credential store."""

from __future__ import annotations

from .sqlalchemy_credential_store import SQLAlchemyCredentialStore, token_digest

__all__ = ["SQLAlchemyCredentialStore", "token_digest"]
