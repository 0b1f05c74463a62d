"""Unit tests for settings helpers."""

from __future__ import annotations

from datetime import timedelta

import pytest
from authsvc.core.config import (
    CONFIG_MAP,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_bool,
    get_config,
    load_token_config,
)
from authsvc.services._shared.errors import ConfigurationError


def test_load_token_config_defaults_lifetimes() -> None:
    cfg = load_token_config({"JWT_SECRET": "a", "JWT_REFRESH_SECRET": "r"})

    assert cfg.access_secret == "a"
    assert cfg.refresh_secret == "r"
    assert cfg.access_expires == timedelta(minutes=15)
    assert cfg.refresh_expires == timedelta(days=7)
    cfg.require_secrets()


def test_load_token_config_custom_lifetimes() -> None:
    cfg = load_token_config(
        {
            "JWT_SECRET": "a",
            "JWT_REFRESH_SECRET": "r",
            "JWT_ACCESS_EXPIRES_SECONDS": "60",
            "JWT_REFRESH_EXPIRES_SECONDS": 3600,
        }
    )

    assert cfg.access_expires == timedelta(seconds=60)
    assert cfg.refresh_expires == timedelta(hours=1)


def test_load_token_config_keeps_explicit_zero() -> None:
    cfg = load_token_config(
        {
            "JWT_SECRET": "a",
            "JWT_REFRESH_SECRET": "r",
            "JWT_ACCESS_EXPIRES_SECONDS": 0,
            "JWT_REFRESH_EXPIRES_SECONDS": "0",
        }
    )

    assert cfg.access_expires == timedelta(0)
    assert cfg.refresh_expires == timedelta(0)


def test_load_token_config_blank_lifetime_uses_default() -> None:
    cfg = load_token_config(
        {"JWT_SECRET": "a", "JWT_REFRESH_SECRET": "r", "JWT_ACCESS_EXPIRES_SECONDS": " "}
    )

    assert cfg.access_expires == timedelta(minutes=15)


@pytest.mark.parametrize(
    "source",
    [
        {},
        {"JWT_SECRET": "a"},
        {"JWT_REFRESH_SECRET": "r"},
        {"JWT_SECRET": "", "JWT_REFRESH_SECRET": "r"},
    ],
)
def test_missing_secrets_fail_validation(source) -> None:
    cfg = load_token_config(source)

    with pytest.raises(ConfigurationError) as exc:
        cfg.require_secrets()
    assert str(exc.value) == "JWT secrets are not defined in environment variables"


def test_token_config_is_immutable() -> None:
    cfg = load_token_config({"JWT_SECRET": "a", "JWT_REFRESH_SECRET": "r"})

    with pytest.raises(AttributeError):
        cfg.access_expires = timedelta(hours=1)  # type: ignore[misc]


def test_get_config_selects_by_app_env(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    assert get_config() is ProductionConfig

    monkeypatch.setenv("APP_ENV", "Testing ")
    assert get_config() is TestingConfig

    monkeypatch.setenv("APP_ENV", "unknown")
    assert get_config() is DevelopmentConfig
    assert set(CONFIG_MAP) == {"development", "testing", "production"}


@pytest.mark.parametrize(
    "raw, expected", [("1", True), ("Yes", True), ("off", False), ("0", False)]
)
def test_env_bool(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("SOME_FLAG", raw)
    assert env_bool("SOME_FLAG") is expected


def test_env_bool_default(monkeypatch) -> None:
    monkeypatch.delenv("SOME_FLAG", raising=False)
    assert env_bool("SOME_FLAG", default=True) is True
