"""SQLAlchemy engine, session factory and declarative base.

The engine is created in :func:`authsvc.factory.create_app` and the session
factory is handed to the credential store adapter.
"""

from __future__ import annotations

from typing import Any

from flask import Flask
from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base sharing the naming convention above."""

    metadata = MetaData(naming_convention=convention)


def build_engine(url: str, *, echo: bool = False) -> Engine:
    """Create an engine; in-memory SQLite gets a single shared connection."""
    kwargs: dict[str, Any] = {"echo": echo}
    in_memory = url.endswith(":memory:") or url in {"sqlite://", "sqlite:///"}
    if url.startswith("sqlite") and in_memory:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create all tables known to :data:`Base.metadata`."""
    # Ensure models are imported so the metadata is populated
    from authsvc import models as _models  # noqa: F401

    Base.metadata.create_all(engine)


def init_app(app: Flask) -> None:
    """Bind an engine and session factory to ``app.extensions``.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``DATABASE_URL``, ``SQLALCHEMY_ECHO`` and
        ``AUTO_CREATE_SCHEMA`` settings are consulted.
    """
    engine = build_engine(
        app.config["DATABASE_URL"], echo=bool(app.config.get("SQLALCHEMY_ECHO", False))
    )
    if app.config.get("AUTO_CREATE_SCHEMA", False):
        create_schema(engine)
    app.extensions["db_engine"] = engine
    app.extensions["db_session_factory"] = build_session_factory(engine)


def get_session_factory(app: Flask) -> sessionmaker[Session]:
    """Return the session factory registered by :func:`init_app`."""
    try:
        return app.extensions["db_session_factory"]
    except KeyError as exc:
        raise RuntimeError("Database is not initialized. Call init_app() first.") from exc
