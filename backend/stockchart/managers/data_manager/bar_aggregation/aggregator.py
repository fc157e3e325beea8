"""Bar Aggregator

Folds daily bars into weekly or monthly candles.
"""
from typing import List, Sequence, Union

from stockchart.core.enums import ChartInterval
from stockchart.core.exceptions import AggregationError
from stockchart.models.bars import Bar
from stockchart.managers.data_manager.bar_aggregation.grouping import group_by_calendar
from stockchart.managers.data_manager.bar_aggregation.normalization import (
    BarLike,
    normalize_to_bars,
    ensure_chronological,
)
from stockchart.managers.data_manager.bar_aggregation.ohlcv import aggregate_ohlcv
from stockchart.logger import logger


def parse_chart_interval(interval: Union[str, ChartInterval]) -> ChartInterval:
    """Resolve an interval name ("daily", "weekly", "monthly").

    Raises:
        AggregationError: If the interval is unknown
    """
    if isinstance(interval, ChartInterval):
        return interval
    try:
        return ChartInterval(str(interval).strip().lower())
    except ValueError:
        supported = ", ".join(i.value for i in ChartInterval)
        raise AggregationError(
            f"Unsupported interval '{interval}'. Supported: {supported}"
        )


class BarAggregator:
    """Daily bar aggregation engine.

    Example usage:
        agg = BarAggregator("weekly")
        weekly = agg.aggregate(daily_bars)

        # Daily is the identity: the very same list comes back
        assert BarAggregator("daily").aggregate(daily_bars) is daily_bars
    """

    def __init__(self, interval: Union[str, ChartInterval]):
        self.interval = parse_chart_interval(interval)

    def aggregate(self, items: Sequence[BarLike]) -> Union[Sequence[BarLike], List[Bar]]:
        """Aggregate items to the target interval.

        Args:
            items: Daily bars, oldest first

        Returns:
            ``items`` itself for DAILY, otherwise one Bar per bucket in
            first-seen order
        """
        if self.interval == ChartInterval.DAILY:
            return items

        if not items:
            return []

        bars = ensure_chronological(normalize_to_bars(list(items)))
        grouped = group_by_calendar(bars, self.interval)

        result = [aggregate_ohlcv(bucket_bars) for _, bucket_bars in grouped]

        logger.debug(
            f"Aggregated {len(result)} {self.interval.value} bars from "
            f"{len(bars)} daily bars"
        )
        return result


def aggregate(
    bars: Sequence[BarLike],
    interval: Union[str, ChartInterval]
) -> Union[Sequence[BarLike], List[Bar]]:
    """Aggregate daily bars to ``interval``. See BarAggregator.aggregate."""
    return BarAggregator(interval).aggregate(bars)
