"""
Configuration module
"""
from stockchart.config.settings import (
    settings,
    Settings,
    APIConfig,
    LoggerConfig,
    UpstreamConfig,
    CacheConfig,
    ProxyConfig,
)

__all__ = [
    "settings",
    "Settings",
    "APIConfig",
    "LoggerConfig",
    "UpstreamConfig",
    "CacheConfig",
    "ProxyConfig",
]
