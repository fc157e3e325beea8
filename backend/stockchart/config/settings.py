"""
Application configuration using pydantic-settings with nested structure
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pathlib import Path

from stockchart.core.exceptions import ConfigurationError


LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


# ============================================================================
# NESTED CONFIGURATION MODELS
# ============================================================================

# Get absolute path to .env file (backend directory)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BASE_DIR / ".env"


class APIConfig(BaseSettings):
    """HTTP API server configuration."""
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    model_config = SettingsConfigDict(env_prefix="API__", extra="ignore")


class LoggerConfig(BaseSettings):
    """Logger configuration settings."""
    default_level: str = "INFO"
    file_path: str = "./data/logs/app.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    filter_enabled: bool = True
    filter_max_history: int = 5
    filter_time_threshold_seconds: float = 1.0
    model_config = SettingsConfigDict(env_prefix="LOGGER__", extra="ignore")


class UpstreamConfig(BaseSettings):
    """Upstream finance provider (Yahoo Finance v8 chart API)."""
    base_url: str = "https://query1.finance.yahoo.com"
    market_suffix: str = ".NS"
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )
    timeout_seconds: float = 30.0
    model_config = SettingsConfigDict(env_prefix="UPSTREAM__", extra="ignore")


class CacheConfig(BaseSettings):
    """In-memory response cache configuration."""
    capacity: int = 100
    model_config = SettingsConfigDict(env_prefix="CACHE__", extra="ignore")


class ProxyConfig(BaseSettings):
    """Stock data proxy behaviour."""
    default_lookback_days: int = 90
    # Legacy filter: drop a row when any OHLCV value is falsy (including 0)
    strict_truthy_filter: bool = False
    model_config = SettingsConfigDict(env_prefix="PROXY__", extra="ignore")


# ============================================================================
# MAIN SETTINGS CLASS
# ============================================================================

class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Configuration is organized into nested sections for better organization.
    Use double underscore (__) in env vars to access nested configs.

    Example:
        LOGGER__DEFAULT_LEVEL=DEBUG
        CACHE__CAPACITY=250
        UPSTREAM__MARKET_SUFFIX=.BO
    """

    # Application metadata
    APP_NAME: str = "Stock Chart Data Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Nested configuration sections
    API: APIConfig = Field(default_factory=APIConfig)
    LOGGER: LoggerConfig = Field(default_factory=LoggerConfig)
    UPSTREAM: UpstreamConfig = Field(default_factory=UpstreamConfig)
    CACHE: CacheConfig = Field(default_factory=CacheConfig)
    PROXY: ProxyConfig = Field(default_factory=ProxyConfig)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Rebuild nested configs so each reads its own env prefix
        self.API = APIConfig()
        self.LOGGER = LoggerConfig()
        self.UPSTREAM = UpstreamConfig()
        self.CACHE = CacheConfig()
        self.PROXY = ProxyConfig()
        self.validate_sections()

    def validate_sections(self) -> None:
        """Reject values the service cannot start with.

        Raises:
            ConfigurationError: If a section holds an unusable value
        """
        if self.LOGGER.default_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"LOGGER__DEFAULT_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got '{self.LOGGER.default_level}'"
            )
        if self.CACHE.capacity < 1:
            raise ConfigurationError(f"CACHE__CAPACITY must be at least 1, got {self.CACHE.capacity}")
        if self.PROXY.default_lookback_days < 0:
            raise ConfigurationError(
                f"PROXY__DEFAULT_LOOKBACK_DAYS must not be negative, got {self.PROXY.default_lookback_days}"
            )
        if self.UPSTREAM.timeout_seconds <= 0:
            raise ConfigurationError(
                f"UPSTREAM__TIMEOUT_SECONDS must be positive, got {self.UPSTREAM.timeout_seconds}"
            )

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_nested_delimiter="__",
        env_prefix=""
    )


# Global settings instance
from dotenv import load_dotenv

# Load .env file into environment variables
if _ENV_FILE.exists():
    load_dotenv(str(_ENV_FILE), override=True)

settings = Settings()
