"""
External service integrations
"""
from stockchart.integrations.yahoo_chart import (
    YahooChartClient,
    extract_chart_result,
    reshape_chart_result,
    to_unix_seconds,
)

__all__ = [
    "YahooChartClient",
    "extract_chart_result",
    "reshape_chart_result",
    "to_unix_seconds",
]
