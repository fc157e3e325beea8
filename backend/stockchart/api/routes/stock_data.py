"""
Stock Data API Routes
Daily OHLCV proxy in front of the upstream finance provider
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from stockchart.core.exceptions import MethodNotAllowedError
from stockchart.managers.data_manager import DataManager, get_data_manager
from stockchart.models.bars import DailyBar
from stockchart.logger import logger

router = APIRouter()


@router.get("/stockData", response_model=List[DailyBar])
async def get_stock_data(
    symbol: Optional[str] = Query(None, description="Stock symbol without market suffix"),
    startDate: Optional[str] = Query(None, description="Window start (ISO-8601)"),
    endDate: Optional[str] = Query(None, description="Window end (ISO-8601)"),
    data_manager: DataManager = Depends(get_data_manager),
):
    """
    Daily OHLCV bars for a symbol

    **Example:**
    ```
    GET /api/stockData?symbol=RELIANCE&startDate=2024-01-01T00:00:00.000Z&endDate=2024-03-31T00:00:00.000Z
    ```

    Responses are cached in memory per (symbol, start day, end day).
    """
    logger.debug(f"stockData requested: symbol={symbol} start={startDate} end={endDate}")
    return await data_manager.get_stock_data(symbol, startDate, endDate)


@router.api_route(
    "/stockData",
    methods=["POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
async def stock_data_method_not_allowed():
    """Only GET is supported"""
    raise MethodNotAllowedError()
