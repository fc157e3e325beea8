"""Yahoo Finance Chart Integration

Fetches daily OHLCV history from the Yahoo Finance v8 chart API and maps
the payload into DailyBar objects.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

from stockchart.config import settings
from stockchart.models.bars import DailyBar
from stockchart.logger import logger


OHLCV_FIELDS = ("open", "high", "low", "close", "volume")


def to_unix_seconds(dt: datetime) -> int:
    """Whole-second Unix timestamp (floor of milliseconds / 1000)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return math.floor(dt.timestamp())


class YahooChartClient:
    """Thin async client for the v8 chart endpoint.

    A single GET per call; no retries. HTTP error statuses surface as
    ``httpx.HTTPStatusError`` for the caller to translate.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        market_suffix: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.UPSTREAM.base_url).rstrip("/")
        self.market_suffix = settings.UPSTREAM.market_suffix if market_suffix is None else market_suffix
        self.user_agent = user_agent or settings.UPSTREAM.user_agent
        self.timeout = timeout or settings.UPSTREAM.timeout_seconds
        # Injected transport lets tests stand in for the network
        self._transport = transport

    def chart_url(self, symbol: str) -> str:
        return f"{self.base_url}/v8/finance/chart/{symbol}{self.market_suffix}"

    async def fetch_chart(self, symbol: str, period1: int, period2: int) -> Dict[str, Any]:
        """Fetch the raw daily chart payload for ``symbol``.

        Args:
            symbol: Symbol without market suffix (e.g. "RELIANCE")
            period1: Window start, Unix seconds
            period2: Window end, Unix seconds

        Returns:
            Decoded JSON payload

        Raises:
            httpx.HTTPStatusError: Upstream answered with an error status
            httpx.HTTPError: Network level failure
        """
        params = {
            "period1": period1,
            "period2": period2,
            "interval": "1d",
            "events": "history",
            "includeAdjustedClose": "true",
        }
        headers = {"User-Agent": self.user_agent}
        url = self.chart_url(symbol)

        logger.info(f"[Yahoo] Requesting daily bars for {symbol}{self.market_suffix} | Range: {period1} to {period2}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.get(url, params=params, headers=headers)

        if resp.status_code != 200:
            logger.error(
                f"Yahoo chart request failed: status={resp.status_code} body={resp.text[:500]}"
            )
        resp.raise_for_status()
        return resp.json()


def extract_chart_result(payload: Any) -> Optional[Dict[str, Any]]:
    """Return ``chart.result[0]`` or None when the payload carries no result."""
    if not isinstance(payload, dict):
        return None
    chart = payload.get("chart") or {}
    results = chart.get("result") or []
    if not results or not results[0]:
        return None
    return results[0]


def _is_missing(value: Any, strict_truthy: bool) -> bool:
    if strict_truthy:
        # Legacy behaviour: zero counts as missing
        return not value or (isinstance(value, float) and math.isnan(value))
    return value is None or (isinstance(value, float) and math.isnan(value))


def reshape_chart_result(result: Dict[str, Any], strict_truthy: bool = False) -> List[DailyBar]:
    """Zip timestamps with the OHLCV arrays into DailyBars.

    An index is dropped when any OHLCV value is missing (None, NaN or past
    the end of its array). With ``strict_truthy`` zero values are dropped
    as well.

    Args:
        result: ``chart.result[0]`` of the upstream payload
        strict_truthy: Drop indexes holding any falsy value

    Returns:
        DailyBars in upstream order
    """
    timestamps = result.get("timestamp") or []
    quotes = (result.get("indicators") or {}).get("quote") or [{}]
    ohlcv = quotes[0] or {}
    columns = {field: ohlcv.get(field) or [] for field in OHLCV_FIELDS}

    bars: List[DailyBar] = []
    skipped = 0

    for index, ts in enumerate(timestamps):
        values = {
            field: column[index] if index < len(column) else None
            for field, column in columns.items()
        }
        if ts is None or any(_is_missing(v, strict_truthy) for v in values.values()):
            skipped += 1
            continue

        bars.append(
            DailyBar(
                time=datetime.fromtimestamp(int(ts), tz=timezone.utc).date(),
                open=round(float(values["open"]), 2),
                high=round(float(values["high"]), 2),
                low=round(float(values["low"]), 2),
                close=round(float(values["close"]), 2),
                volume=int(values["volume"]),
            )
        )

    if skipped:
        logger.debug(f"Skipped {skipped} incomplete rows out of {len(timestamps)}")

    return bars
