"""Upstream Provider Stand-in

Fixtures wiring a DataManager to an httpx.MockTransport instead of the
network, and a FastAPI TestClient using that DataManager.
"""
from typing import Any, Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from stockchart.config.settings import ProxyConfig
from stockchart.integrations.yahoo_chart import YahooChartClient
from stockchart.managers.data_manager import BarCache, DataManager, get_data_manager


UPSTREAM_BASE_URL = "https://upstream.test"


class UpstreamStub:
    """Records requests and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"chart": {"result": None, "error": None}}
        self.error: Optional[Exception] = None
        self.responder: Optional[Callable[[httpx.Request], httpx.Response]] = None

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def respond_with(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.responder is not None:
            return self.responder(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    """Fresh upstream stand-in."""
    return UpstreamStub()


@pytest.fixture
def proxy_config():
    return ProxyConfig(default_lookback_days=90, strict_truthy_filter=False)


@pytest.fixture
def make_data_manager(upstream, proxy_config):
    """Factory building DataManagers wired to the upstream stand-in."""

    def build(capacity: int = 100, config: Optional[ProxyConfig] = None) -> DataManager:
        client = YahooChartClient(
            base_url=UPSTREAM_BASE_URL,
            market_suffix=".NS",
            user_agent="Mozilla/5.0 (test)",
            timeout=5.0,
            transport=upstream.transport,
        )
        return DataManager(
            client=client,
            cache=BarCache(capacity=capacity),
            config=config or proxy_config,
        )

    return build


@pytest.fixture
def data_manager(make_data_manager):
    return make_data_manager()


@pytest.fixture
def api_client(data_manager):
    """TestClient whose routes use the stubbed DataManager."""
    from stockchart.main import app

    app.dependency_overrides[get_data_manager] = lambda: data_manager
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class ExplodingDataManager:
    """Fails with an exception the service does not know about."""

    async def get_stock_data(self, *args, **kwargs):
        raise RuntimeError("cache backend exploded")


@pytest.fixture
def lenient_api_client():
    """TestClient that returns 500 responses instead of re-raising server errors."""
    from stockchart.main import app

    app.dependency_overrides[get_data_manager] = ExplodingDataManager
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
