"""Calendar Bucketing

Bucket keys and grouping of daily bars into weekly / monthly buckets.
"""
from datetime import date, timedelta
from typing import Callable, Dict, List, Tuple

from stockchart.core.enums import ChartInterval
from stockchart.core.exceptions import AggregationError
from stockchart.models.bars import Bar


def week_start_key(day: date) -> str:
    """ISO date of the Monday of the week containing ``day``.

    Weeks run Monday to Sunday, so a Sunday bar joins the bucket of the
    Monday six days earlier rather than opening a new week.

    Example:
        >>> week_start_key(date(2024, 1, 18))  # Thursday
        '2024-01-15'
    """
    return (day - timedelta(days=day.weekday())).isoformat()


def month_key(day: date) -> str:
    """Zero-padded ``YYYY-MM`` of ``day``."""
    return f"{day.year:04d}-{day.month:02d}"


BUCKET_KEY_FUNCS: Dict[ChartInterval, Callable[[date], str]] = {
    ChartInterval.WEEKLY: week_start_key,
    ChartInterval.MONTHLY: month_key,
}


def bucket_key(bar: Bar, interval: ChartInterval) -> str:
    """Bucket key of a single bar for the given interval."""
    try:
        key_func = BUCKET_KEY_FUNCS[interval]
    except KeyError:
        raise AggregationError(f"No bucketing defined for interval '{interval.value}'")
    return key_func(bar.day)


def group_by_calendar(
    bars: List[Bar],
    interval: ChartInterval
) -> List[Tuple[str, List[Bar]]]:
    """Group bars by calendar bucket (week or month).

    Buckets are returned in the order their key is first seen, and bars keep
    their input order inside a bucket. With chronological input this is
    chronological output.

    Args:
        bars: Bars to group
        interval: WEEKLY or MONTHLY

    Returns:
        List of (bucket_key, bucket_bars) tuples
    """
    by_period: Dict[str, List[Bar]] = {}

    for bar in bars:
        by_period.setdefault(bucket_key(bar, interval), []).append(bar)

    return list(by_period.items())
