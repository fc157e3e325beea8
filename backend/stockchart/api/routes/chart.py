"""
Chart API Routes
Aggregated candles (daily / weekly / monthly) for a named period
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from stockchart.core.enums import ChartInterval
from stockchart.managers.data_manager import DataManager, get_data_manager
from stockchart.managers.data_manager.periods import PERIODS, INTERVAL_DEFAULT_PERIOD
from stockchart.models.bars import ChartResponse

router = APIRouter()


class PeriodInfo(BaseModel):
    """Selectable chart period"""
    label: str
    days: int
    auto: Optional[str] = None


class PeriodsResponse(BaseModel):
    """Periods and the period preselected per interval"""
    periods: List[PeriodInfo]
    interval_defaults: Dict[str, str]


@router.get("/chart", response_model=ChartResponse)
async def get_chart(
    symbol: Optional[str] = Query(None, description="Stock symbol without market suffix"),
    period: Optional[str] = Query(None, description="Period label, e.g. 1M, 1Y, 5Y"),
    interval: str = Query(ChartInterval.DAILY.value, description="daily, weekly or monthly"),
    data_manager: DataManager = Depends(get_data_manager),
):
    """
    Aggregated OHLCV candles plus the latest daily change

    The period defaults to YTD for daily, 2Y for weekly and 5Y for monthly.
    """
    return await data_manager.get_chart(symbol, period=period, interval=interval)


@router.get("/chart/periods", response_model=PeriodsResponse)
async def list_periods():
    """Available chart periods"""
    return PeriodsResponse(
        periods=[PeriodInfo(label=p.label, days=p.days, auto=p.auto) for p in PERIODS.values()],
        interval_defaults={i.value: label for i, label in INTERVAL_DEFAULT_PERIOD.items()},
    )
