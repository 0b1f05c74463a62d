"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Final

from dotenv import load_dotenv

from authsvc.services.auth.dto import AuthTokenConfig

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

DEFAULT_ACCESS_EXPIRES_SECONDS: Final[int] = 15 * 60
DEFAULT_REFRESH_EXPIRES_SECONDS: Final[int] = 7 * 24 * 60 * 60


# Loads .env in development (no-op when the file is absent)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    JWT_SECRET: str | None
        HMAC secret for access tokens. No default: startup fails without it.
    JWT_REFRESH_SECRET: str | None
        HMAC secret for refresh tokens. No default: startup fails without it.
    JWT_ACCESS_EXPIRES_SECONDS: int
        Access token lifetime (15 minutes by default).
    JWT_REFRESH_EXPIRES_SECONDS: int
        Refresh token lifetime (7 days by default).
    DATABASE_URL: str
        SQLAlchemy connection string for the credential store.
    SQLALCHEMY_ECHO: bool
        When ``True`` SQLAlchemy logs SQL statements for debugging.
    AUTO_CREATE_SCHEMA: bool
        Create tables on startup (development convenience).
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Secrets
    JWT_SECRET = os.getenv("JWT_SECRET")
    JWT_REFRESH_SECRET = os.getenv("JWT_REFRESH_SECRET")
    JWT_ACCESS_EXPIRES_SECONDS = env_int(
        "JWT_ACCESS_EXPIRES_SECONDS", DEFAULT_ACCESS_EXPIRES_SECONDS
    )
    JWT_REFRESH_EXPIRES_SECONDS = env_int(
        "JWT_REFRESH_EXPIRES_SECONDS", DEFAULT_REFRESH_EXPIRES_SECONDS
    )

    # DB
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./auth.db")
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    AUTO_CREATE_SCHEMA = env_bool("AUTO_CREATE_SCHEMA", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    CORS_MAX_AGE = 600  # 10 minutes

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode and schema auto-creation by default.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    AUTO_CREATE_SCHEMA = env_bool("AUTO_CREATE_SCHEMA", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    - Provides throwaway signing secrets so the app can boot.
    """

    TESTING = True
    DEBUG = False
    JWT_SECRET = os.getenv("JWT_SECRET", "test-jwt-secret-key-for-testing-only")
    JWT_REFRESH_SECRET = os.getenv(
        "JWT_REFRESH_SECRET", "test-jwt-refresh-secret-key-for-testing-only"
    )
    DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    AUTO_CREATE_SCHEMA = True


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug and SQL echoing disabled; schema is managed out of band.
    """

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def load_token_config(source: Mapping[str, Any]) -> AuthTokenConfig:
    """Build the immutable token configuration from a settings mapping.

    Parameters
    ----------
    source: Mapping[str, Any]
        ``app.config``, ``os.environ`` or any mapping with the ``JWT_*`` keys.

    Returns
    -------
    AuthTokenConfig
        Secrets are passed through as-is; validation happens when the auth
        service (or token provider) is constructed.
    """
    return AuthTokenConfig(
        access_secret=source.get("JWT_SECRET") or None,
        refresh_secret=source.get("JWT_REFRESH_SECRET") or None,
        access_expires=_lifetime(
            source, "JWT_ACCESS_EXPIRES_SECONDS", DEFAULT_ACCESS_EXPIRES_SECONDS
        ),
        refresh_expires=_lifetime(
            source, "JWT_REFRESH_EXPIRES_SECONDS", DEFAULT_REFRESH_EXPIRES_SECONDS
        ),
    )


def _lifetime(source: Mapping[str, Any], key: str, default: int) -> timedelta:
    """Read a lifetime in seconds; only a missing or blank value falls back."""
    raw = source.get(key)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return timedelta(seconds=default)
    return timedelta(seconds=int(raw))
