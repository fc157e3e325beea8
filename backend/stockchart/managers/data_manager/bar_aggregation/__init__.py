"""Bar Aggregation

Folds daily OHLCV bars into coarser candles:
- daily   -> identity
- weekly  -> one bar per Monday-start week
- monthly -> one bar per calendar month

Every bucket uses the same OHLCV fold (first open, max high, min low,
last close, summed volume).
"""

from stockchart.managers.data_manager.bar_aggregation.aggregator import (
    BarAggregator,
    aggregate,
    parse_chart_interval,
)
from stockchart.managers.data_manager.bar_aggregation.grouping import (
    week_start_key,
    month_key,
    bucket_key,
    group_by_calendar,
)
from stockchart.managers.data_manager.bar_aggregation.ohlcv import aggregate_ohlcv

__all__ = [
    'BarAggregator',
    'aggregate',
    'parse_chart_interval',
    'week_start_key',
    'month_key',
    'bucket_key',
    'group_by_calendar',
    'aggregate_ohlcv',
]
