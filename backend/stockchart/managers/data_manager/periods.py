"""Chart Periods

Named look-back windows a chart can be requested for, and the date range
each one resolves to.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple, Union

from stockchart.core.enums import ChartInterval


DEFAULT_PERIOD_DAYS = 90


@dataclass(frozen=True)
class ChartPeriod:
    label: str
    days: int
    auto: Optional[str] = None


PERIODS: Dict[str, ChartPeriod] = {
    p.label: p
    for p in (
        ChartPeriod("YTD", 365, auto="ytd"),
        ChartPeriod("1M", 30),
        ChartPeriod("3M", 90),
        ChartPeriod("6M", 180),
        ChartPeriod("1Y", 365),
        ChartPeriod("2Y", 730),
        ChartPeriod("5Y", 1825),
        ChartPeriod("Max", 3650),
    )
}

# Period preselected when the user switches interval
INTERVAL_DEFAULT_PERIOD: Dict[ChartInterval, str] = {
    ChartInterval.DAILY: "YTD",
    ChartInterval.WEEKLY: "2Y",
    ChartInterval.MONTHLY: "5Y",
}


def period_days(label: Optional[str]) -> int:
    """Look-back length of a period; unknown labels fall back to 90 days."""
    period = PERIODS.get(label or "")
    return period.days if period else DEFAULT_PERIOD_DAYS


def default_period_for(interval: Union[str, ChartInterval]) -> str:
    return INTERVAL_DEFAULT_PERIOD[ChartInterval(interval)]


def compute_date_range(
    period: Optional[str],
    now: Optional[datetime] = None
) -> Tuple[datetime, datetime]:
    """Resolve a period label to a (start, end) range ending at ``now``.

    Args:
        period: Period label such as "1M" or "5Y"
        now: End of the range (defaults to the current UTC time)

    Returns:
        (start, end) as timezone-aware datetimes
    """
    end = now or datetime.now(timezone.utc)
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)
    return end - timedelta(days=period_days(period)), end
