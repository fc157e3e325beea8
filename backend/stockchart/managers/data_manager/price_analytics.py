"""Price Analytics

Derived figures computed from a daily series.
"""
from typing import Sequence

from stockchart.models.bars import DailyBar, DailyChange


def compute_daily_change(bars: Sequence[DailyBar]) -> DailyChange:
    """Change of the latest close versus the previous close.

    Returns a zero change when fewer than two bars are available or the
    previous close is zero.
    """
    if len(bars) < 2:
        return DailyChange()

    latest, previous = bars[-1], bars[-2]
    if previous.close == 0:
        return DailyChange()

    price = latest.close - previous.close
    return DailyChange(price=price, percentage=price / previous.close * 100)
