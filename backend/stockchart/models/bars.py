"""
Price bar models shared by the proxy, the aggregator and the API
"""
from datetime import date, datetime, time, timezone
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from stockchart.core.enums import ChartInterval


class Bar(BaseModel):
    """OHLCV bar keyed by epoch seconds (aggregator input and output)"""
    model_config = ConfigDict(frozen=True)

    time: int
    open: float
    high: float
    low: float
    close: float
    volume: int = Field(ge=0)

    @property
    def day(self) -> date:
        """UTC calendar date of the bar"""
        return datetime.fromtimestamp(self.time, tz=timezone.utc).date()


class DailyBar(BaseModel):
    """Daily OHLCV bar as returned by the stock data proxy.

    Prices are rounded to 2 decimals and volume truncated to an int when
    the bar is built from an upstream payload.
    """
    model_config = ConfigDict(frozen=True)

    time: date
    open: float
    high: float
    low: float
    close: float
    volume: int = Field(ge=0)

    def to_bar(self) -> Bar:
        """Convert to an epoch-seconds Bar (UTC midnight of the trading day)."""
        midnight = datetime.combine(self.time, time.min, tzinfo=timezone.utc)
        return Bar(
            time=int(midnight.timestamp()),
            open=self.open,
            high=self.high,
            low=self.low,
            close=self.close,
            volume=self.volume,
        )


class DailyChange(BaseModel):
    """Change of the latest close versus the previous close"""
    price: float = 0.0
    percentage: float = 0.0


class ChartResponse(BaseModel):
    """Aggregated chart payload for one symbol"""
    symbol: str
    interval: ChartInterval
    period: str
    count: int
    bars: List[Bar]
    change: DailyChange
