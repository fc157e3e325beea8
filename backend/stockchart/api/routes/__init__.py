"""
API Routes
"""
from stockchart.api.routes import chart, stock_data

__all__ = ["chart", "stock_data"]
