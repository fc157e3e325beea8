"""
Custom exceptions for the stock chart service.

All custom exceptions should be defined here for easy discovery
and consistent error handling throughout the application.
"""
from typing import Any, Dict, Optional


class StockChartError(Exception):
    """Base exception for all stock chart service errors."""
    pass


class ConfigurationError(StockChartError):
    """Raised when there's an error in configuration."""
    pass


class AggregationError(StockChartError, ValueError):
    """Raised when bars cannot be aggregated (e.g. unknown interval)."""
    pass


class DataProxyError(StockChartError):
    """Base error of the stock data proxy.

    Carries the HTTP status and the response body fields the API returns
    to the caller.
    """
    status_code: int = 500
    default_details: str = "Error fetching stock data"

    def __init__(self, details: Optional[str] = None, error: Optional[str] = None):
        self.details = details or self.default_details
        self.error = error
        super().__init__(error or self.details)

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"details": self.details}
        if self.error is not None:
            body["error"] = self.error
        return body


class MethodNotAllowedError(DataProxyError):
    """Raised for any request method other than GET."""
    status_code = 405
    default_details = "Method not allowed"


class InvalidRequestError(DataProxyError):
    """Raised when request parameters are malformed."""
    status_code = 400
    default_details = "Invalid request"


class SymbolRequiredError(InvalidRequestError):
    """Raised when the symbol parameter is missing or blank."""
    default_details = "Symbol is required"


class NoDataError(DataProxyError):
    """Raised when the upstream payload carries no chart result."""
    status_code = 404
    default_details = "No data available for this symbol"


class SymbolNotFoundError(DataProxyError):
    """Raised when the upstream provider answers 404."""
    status_code = 404
    default_details = "Stock symbol not found"


class RateLimitedError(DataProxyError):
    """Raised when the upstream provider answers 429."""
    status_code = 429
    default_details = "Too many requests. Please try again later."


class UpstreamError(DataProxyError):
    """Raised for any other upstream or processing failure."""
    status_code = 500
