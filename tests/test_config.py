"""Tests for environment-driven settings and logging setup."""

import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from storefront import Settings, configure_logging, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("GATEWAY_NAME", "GATEWAY_TIMEOUT_SECONDS", "DEFAULT_CURRENCY", "LOG_LEVEL"):
        monkeypatch.delenv(f"STOREFRONT_{name}", raising=False)

    settings = Settings(_env_file=None)

    assert settings.gateway_name == "Wompi"
    assert settings.gateway_timeout_seconds == 30.0
    assert settings.default_currency == "COP"
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STOREFRONT_GATEWAY_NAME", "Stripe")
    monkeypatch.setenv("STOREFRONT_GATEWAY_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("STOREFRONT_DEFAULT_CURRENCY", "usd")
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.gateway_name == "Stripe"
    assert settings.gateway_timeout_seconds == 5.0
    assert settings.default_currency == "USD"
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, gateway_timeout_seconds=0)


def test_configure_logging_json(capsys):
    configure_logging(Settings(_env_file=None, log_level="INFO", log_json=True))
    try:
        logger.bind(purchase_id="order-1").info("Payment approved")
        logger.debug("hidden")
        err = capsys.readouterr().err
    finally:
        logger.remove()
        logger.add(sys.__stderr__)

    assert '"purchase_id": "order-1"' in err
    assert "Payment approved" in err
    assert "hidden" not in err
