"""
Stock Chart Data Service

Daily OHLCV proxy for a third-party finance provider plus weekly/monthly
candle aggregation.
"""

__version__ = "1.0.0"
