"""Pytest fixtures for the auth service.

Every test gets a fresh in-memory credential store and fresh test doubles, so
nothing leaks between cases. SQL-backed tests use their own in-memory SQLite
engine per test.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from authsvc import create_app
from authsvc.core.config import TestingConfig
from authsvc.core.database import build_engine, build_session_factory, create_schema
from authsvc.infra.sqlalchemy import SQLAlchemyCredentialStore
from authsvc.services._shared.ports import (
    InMemoryCredentialStore,
    StubPasswordHasher,
    StubTokenProvider,
)
from authsvc.services.auth.dto import AuthTokenConfig
from authsvc.services.auth.service import AuthService
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

ACCESS_SECRET = "test-jwt-secret-key-for-testing-only"
REFRESH_SECRET = "test-jwt-refresh-secret-key-for-testing-only"


# ------------------------------ Core doubles ------------------------------- #
@pytest.fixture()
def token_config() -> AuthTokenConfig:
    """Token configuration with distinct test secrets and default lifetimes."""
    return AuthTokenConfig(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


@pytest.fixture()
def store() -> InMemoryCredentialStore:
    """Fresh in-memory credential store (one per test)."""
    return InMemoryCredentialStore()


@pytest.fixture()
def hasher() -> StubPasswordHasher:
    return StubPasswordHasher()


@pytest.fixture()
def tokens() -> StubTokenProvider:
    return StubTokenProvider()


@pytest.fixture()
def service(token_config, store, hasher, tokens) -> AuthService:
    """
    Build an AuthService wired to in-memory doubles.

    .. note::
       No bcrypt and no JWT: behavior is fully deterministic.
    """
    return AuthService(
        config=token_config,
        store=store,
        password_hasher=hasher,
        token_provider=tokens,
    )


@pytest.fixture()
def real_service(token_config, store) -> AuthService:
    """AuthService with the production bcrypt hasher and PyJWT provider."""
    return AuthService(config=token_config, store=store)


# ------------------------------- SQLAlchemy -------------------------------- #
@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with the schema created."""
    eng = build_engine("sqlite:///:memory:")
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine) -> sessionmaker[Session]:
    return build_session_factory(engine)


@pytest.fixture()
def sql_store(session_factory) -> SQLAlchemyCredentialStore:
    return SQLAlchemyCredentialStore(session_factory)


@pytest.fixture()
def session(session_factory) -> Generator[Session, None, None]:
    """Session wired into the Factory Boy helpers."""
    from tests.factories import SQLAlchemySession

    with session_factory() as sess:
        SQLAlchemySession.set(sess)
        yield sess
    SQLAlchemySession.set(None)


# ---------------------------------- Flask ---------------------------------- #
@pytest.fixture()
def app(store) -> Flask:
    """Flask application backed by the per-test in-memory store."""
    application = create_app(TestingConfig, store=store)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture()
def client(app) -> FlaskClient:
    return app.test_client()
