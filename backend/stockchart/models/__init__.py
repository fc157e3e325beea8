"""
Data models
"""
from stockchart.models.bars import Bar, DailyBar, DailyChange, ChartResponse

__all__ = ["Bar", "DailyBar", "DailyChange", "ChartResponse"]
