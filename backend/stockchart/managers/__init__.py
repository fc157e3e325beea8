"""
Top-Level Module APIs

All CLI and API interactions should go through the DataManager returned by
get_data_manager().
"""

from stockchart.managers.data_manager.api import (
    DataManager,
    get_data_manager,
    reset_data_manager,
)

__all__ = [
    'DataManager',
    'get_data_manager',
    'reset_data_manager',
]
