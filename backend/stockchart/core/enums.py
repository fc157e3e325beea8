"""
Core enumerations used throughout the service.

These fundamental enums are used by multiple components and should be
imported from here (single source of truth).
"""

from enum import Enum


class ChartInterval(str, Enum):
    """
    Candle interval a chart can be rendered at.

    Values:
        DAILY: One candle per trading day (no aggregation)
        WEEKLY: Daily bars folded per week (Monday-start)
        MONTHLY: Daily bars folded per calendar month
    """
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
