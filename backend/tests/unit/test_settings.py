"""Unit Tests for the nested settings sections"""
import os

import pytest

from stockchart.config.settings import Settings
from stockchart.core.exceptions import ConfigurationError


SECTION_PREFIXES = ("API__", "LOGGER__", "UPSTREAM__", "CACHE__", "PROXY__")


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any section variable."""
    for name in list(os.environ):
        if name.startswith(SECTION_PREFIXES) or name in ("APP_NAME", "APP_VERSION", "DEBUG"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_without_env(clean_env):
    settings = Settings(_env_file=None)

    assert settings.APP_NAME == "Stock Chart Data Service"
    assert settings.API.port == 8000
    assert settings.LOGGER.default_level == "INFO"
    assert settings.UPSTREAM.base_url == "https://query1.finance.yahoo.com"
    assert settings.UPSTREAM.market_suffix == ".NS"
    assert settings.UPSTREAM.timeout_seconds == 30.0
    assert settings.CACHE.capacity == 100
    assert settings.PROXY.default_lookback_days == 90
    assert settings.PROXY.strict_truthy_filter is False


def test_section_env_overrides(clean_env):
    clean_env.setenv("CACHE__CAPACITY", "250")
    clean_env.setenv("UPSTREAM__MARKET_SUFFIX", ".BO")
    clean_env.setenv("PROXY__STRICT_TRUTHY_FILTER", "true")

    settings = Settings(_env_file=None)

    assert settings.CACHE.capacity == 250
    assert settings.UPSTREAM.market_suffix == ".BO"
    assert settings.PROXY.strict_truthy_filter is True
    assert settings.API.port == 8000


@pytest.mark.parametrize("name, value", [
    ("CACHE__CAPACITY", "0"),
    ("LOGGER__DEFAULT_LEVEL", "LOUD"),
    ("PROXY__DEFAULT_LOOKBACK_DAYS", "-1"),
    ("UPSTREAM__TIMEOUT_SECONDS", "0"),
])
def test_unusable_value_rejected(clean_env, name, value):
    clean_env.setenv(name, value)

    with pytest.raises(ConfigurationError) as exc_info:
        Settings(_env_file=None)

    assert name in str(exc_info.value)
