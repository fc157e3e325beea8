"""
Data Manager

Stock data proxy (fetch, cache, reshape) and daily bar aggregation.
"""
from stockchart.managers.data_manager.api import (
    DataManager,
    get_data_manager,
    reset_data_manager,
    build_cache_key,
    parse_request_date,
)
from stockchart.managers.data_manager.cache import BarCache

__all__ = [
    "DataManager",
    "get_data_manager",
    "reset_data_manager",
    "build_cache_key",
    "parse_request_date",
    "BarCache",
]
