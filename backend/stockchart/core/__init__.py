"""
Core building blocks shared by all components.
"""
from stockchart.core.enums import ChartInterval
from stockchart.core.exceptions import (
    StockChartError,
    ConfigurationError,
    AggregationError,
    DataProxyError,
    MethodNotAllowedError,
    InvalidRequestError,
    SymbolRequiredError,
    NoDataError,
    SymbolNotFoundError,
    RateLimitedError,
    UpstreamError,
)

__all__ = [
    "ChartInterval",
    "StockChartError",
    "ConfigurationError",
    "AggregationError",
    "DataProxyError",
    "MethodNotAllowedError",
    "InvalidRequestError",
    "SymbolRequiredError",
    "NoDataError",
    "SymbolNotFoundError",
    "RateLimitedError",
    "UpstreamError",
]
