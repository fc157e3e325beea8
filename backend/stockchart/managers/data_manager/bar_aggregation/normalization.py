"""Input Normalization

Converts various input formats (dicts, DailyBar, Bar) to Bar objects and
puts them in chronological order.
"""
from typing import Dict, List, Union

from stockchart.models.bars import Bar, DailyBar
from stockchart.logger import logger


BarLike = Union[Dict, Bar, DailyBar]


def normalize_to_bars(items: List[BarLike]) -> List[Bar]:
    """Convert all inputs to Bar objects.

    Handles:
    - Bar objects (pass through)
    - DailyBar objects (ISO date -> epoch seconds at UTC midnight)
    - Dicts with time/open/high/low/close/volume keys

    Args:
        items: Source bars

    Returns:
        List of Bar objects
    """
    result = []
    for item in items:
        if isinstance(item, Bar):
            result.append(item)
        elif isinstance(item, DailyBar):
            result.append(item.to_bar())
        else:
            result.append(Bar.model_validate(item))
    return result


def is_chronological(bars: List[Bar]) -> bool:
    """True if bar times never decrease."""
    return all(bars[i - 1].time <= bars[i].time for i in range(1, len(bars)))


def ensure_chronological(bars: List[Bar]) -> List[Bar]:
    """Return bars sorted by time.

    Out-of-order input is sorted (stable, so equal times keep their order)
    and reported, since first/last semantics of open and close depend on it.
    """
    if is_chronological(bars):
        return bars

    logger.warning(
        f"Received {len(bars)} bars out of chronological order; sorting by time "
        f"before bucketing"
    )
    return sorted(bars, key=lambda bar: bar.time)
