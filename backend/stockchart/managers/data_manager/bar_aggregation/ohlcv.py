"""OHLCV Aggregation Core

Shared fold used for every bucket.
"""
from typing import List

from stockchart.models.bars import Bar


def aggregate_ohlcv(items: List[Bar]) -> Bar:
    """Aggregate OHLCV for a group of bars.

    OHLCV Rules:
    - Time: First item's time (not snapped to the bucket boundary)
    - Open: First item's open
    - High: Maximum high across all items
    - Low: Minimum low across all items
    - Close: Last item's close
    - Volume: Sum of all volumes

    Args:
        items: Bars to aggregate (chronologically sorted)

    Returns:
        Aggregated bar

    Raises:
        ValueError: If items is empty
    """
    if not items:
        raise ValueError("Cannot aggregate empty group")

    return Bar(
        time=items[0].time,
        open=items[0].open,
        high=max(bar.high for bar in items),
        low=min(bar.low for bar in items),
        close=items[-1].close,
        volume=sum(bar.volume for bar in items)
    )
