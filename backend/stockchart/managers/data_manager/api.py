"""DataManager Public API

Single entry point for stock data. All CLI commands and API routes must
use this interface.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple, Union

import httpx

from stockchart.config import settings
from stockchart.config.settings import ProxyConfig
from stockchart.core.enums import ChartInterval
from stockchart.core.exceptions import (
    DataProxyError,
    InvalidRequestError,
    NoDataError,
    RateLimitedError,
    SymbolNotFoundError,
    SymbolRequiredError,
    UpstreamError,
)
from stockchart.integrations.yahoo_chart import (
    YahooChartClient,
    extract_chart_result,
    reshape_chart_result,
    to_unix_seconds,
)
from stockchart.managers.data_manager.bar_aggregation import aggregate, parse_chart_interval
from stockchart.managers.data_manager.cache import BarCache
from stockchart.managers.data_manager.periods import compute_date_range, default_period_for
from stockchart.managers.data_manager.price_analytics import compute_daily_change
from stockchart.models.bars import ChartResponse, DailyBar
from stockchart.logger import logger


DateLike = Union[str, datetime, None]


def parse_request_date(value: DateLike) -> Optional[datetime]:
    """Parse an ISO-8601 request parameter into an aware UTC datetime.

    Accepts dates ("2024-01-15") and datetimes with or without a trailing
    "Z". Naive values are taken as UTC. Empty values yield None.

    Raises:
        InvalidRequestError: If the value is not ISO-8601
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise InvalidRequestError(details=f"Invalid date: {value}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError:
        raise InvalidRequestError(details=f"Invalid date: {value}")


def build_cache_key(symbol: str, start: datetime, end: datetime) -> str:
    """``symbol-startDate-endDate`` with both dates truncated to the day.

    Requests for the same window issued moments apart share an entry.
    """
    return f"{symbol}-{start.date().isoformat()}-{end.date().isoformat()}"


class DataManager:
    """
    DataManager - stock data proxy with an in-memory response cache

    Provides:
    - Daily bars for a symbol and date window (cached, upstream on miss)
    - Aggregated chart data (daily / weekly / monthly) for a named period

    The cache and the upstream client are owned by the instance and can be
    injected, so separate instances never share state.
    """

    def __init__(
        self,
        client: Optional[YahooChartClient] = None,
        cache: Optional[BarCache[List[DailyBar]]] = None,
        config: Optional[ProxyConfig] = None,
    ):
        """Initialize DataManager.

        Args:
            client: Upstream chart client. Defaults to one built from settings.
            cache: Response cache. Defaults to a BarCache sized from settings.
            config: Proxy behaviour. Defaults to settings.PROXY.
        """
        self.client = client or YahooChartClient()
        self.cache = cache if cache is not None else BarCache(capacity=settings.CACHE.capacity)
        self.config = config or settings.PROXY

        logger.info(
            f"DataManager initialized (cache capacity={self.cache.capacity}, "
            f"strict_truthy_filter={self.config.strict_truthy_filter})"
        )

    # ==================== REQUEST HANDLING ====================

    def resolve_date_range(self, start_date: DateLike, end_date: DateLike) -> Tuple[datetime, datetime]:
        """Parse the request window, filling in defaults.

        Missing end defaults to now; missing start to end minus the default
        look-back.
        """
        end = parse_request_date(end_date) or datetime.now(timezone.utc)
        start = parse_request_date(start_date)
        if start is None:
            try:
                start = end - timedelta(days=self.config.default_lookback_days)
            except OverflowError as exc:
                raise DataProxyError(error=f"Date out of range: {end.date().isoformat()}") from exc
        return start, end

    async def get_stock_data(
        self,
        symbol: Optional[str],
        start_date: DateLike = None,
        end_date: DateLike = None,
    ) -> List[DailyBar]:
        """Daily bars for ``symbol`` between ``start_date`` and ``end_date``.

        Served from cache when the same (symbol, start day, end day) was
        fetched before; otherwise fetched upstream once and cached.

        Raises:
            SymbolRequiredError: Symbol missing or blank
            InvalidRequestError: Unparseable date
            NoDataError: Upstream payload has no chart result
            SymbolNotFoundError: Upstream 404
            RateLimitedError: Upstream 429
            UpstreamError: Any other failure
        """
        if not symbol or not symbol.strip():
            raise SymbolRequiredError()
        symbol = symbol.strip()

        start, end = self.resolve_date_range(start_date, end_date)
        cache_key = build_cache_key(symbol, start, end)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for {cache_key}")
            return cached

        bars = await self._fetch_daily_bars(symbol, start, end)

        evicted = self.cache.set(cache_key, bars)
        if evicted:
            logger.info(f"Evicted oldest cache entry {evicted}")

        logger.info(f"Fetched {len(bars)} daily bars for {symbol} ({cache_key})")
        return bars

    async def _fetch_daily_bars(self, symbol: str, start: datetime, end: datetime) -> List[DailyBar]:
        """Single upstream round trip, with upstream failures translated."""
        try:
            payload = await self.client.fetch_chart(
                symbol,
                period1=to_unix_seconds(start),
                period2=to_unix_seconds(end),
            )
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error(f"Upstream error for {symbol}: status={status}")
            if status == 404:
                raise SymbolNotFoundError() from exc
            if status == 429:
                raise RateLimitedError() from exc
            raise UpstreamError(error=str(exc)) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"Upstream request for {symbol} failed: {exc}")
            raise UpstreamError(error=str(exc)) from exc

        result = extract_chart_result(payload)
        if result is None:
            logger.warning(f"No chart result in upstream payload for {symbol}")
            raise NoDataError()

        try:
            return reshape_chart_result(result, strict_truthy=self.config.strict_truthy_filter)
        except (TypeError, ValueError, AttributeError, OverflowError, OSError) as exc:
            logger.error(f"Malformed upstream payload for {symbol}: {exc}")
            raise UpstreamError(error=str(exc)) from exc

    # ==================== CHARTS ====================

    async def get_chart(
        self,
        symbol: Optional[str],
        period: Optional[str] = None,
        interval: Union[str, ChartInterval] = ChartInterval.DAILY,
        now: Optional[datetime] = None,
    ) -> ChartResponse:
        """Aggregated chart for ``symbol`` over a named period.

        Args:
            symbol: Stock symbol (without market suffix)
            period: Period label; defaults to the interval's preset
            interval: daily, weekly or monthly
            now: End of the window (defaults to the current time)

        Raises:
            AggregationError: Unknown interval
            DataProxyError: See get_stock_data
        """
        chart_interval = parse_chart_interval(interval)
        period = period or default_period_for(chart_interval)
        start, end = compute_date_range(period, now=now)

        daily = await self.get_stock_data(symbol, start, end)
        bars = aggregate([bar.to_bar() for bar in daily], chart_interval)

        return ChartResponse(
            symbol=symbol.strip(),
            interval=chart_interval,
            period=period,
            count=len(bars),
            bars=bars,
            change=compute_daily_change(daily),
        )


# ==================== SINGLETON ACCESS ====================

_data_manager: Optional[DataManager] = None


def get_data_manager() -> DataManager:
    """Process-wide DataManager used by the API and CLI."""
    global _data_manager
    if _data_manager is None:
        _data_manager = DataManager()
    return _data_manager


def reset_data_manager() -> None:
    """Drop the process-wide instance (tests)."""
    global _data_manager
    _data_manager = None
