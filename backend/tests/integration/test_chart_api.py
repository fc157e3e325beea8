"""Integration Tests for the chart endpoints and service routes"""
from datetime import date

from tests.fixtures.synthetic_data import make_chart_payload, trading_days


class TestChartEndpoint:

    def test_weekly_chart(self, api_client, upstream):
        upstream.respond_with(make_chart_payload(trading_days(date(2024, 1, 1), 10)))

        response = api_client.get("/api/chart", params={"symbol": "INFY", "interval": "weekly", "period": "1M"})

        assert response.status_code == 200
        body = response.json()
        assert body["symbol"] == "INFY"
        assert body["interval"] == "weekly"
        assert body["period"] == "1M"
        assert body["count"] == 2
        assert body["bars"][0]["open"] == 100.12
        assert body["bars"][0]["close"] == 104.5
        assert body["bars"][0]["volume"] == sum(10000 + i * 100 for i in range(5))
        assert set(body["change"]) == {"price", "percentage"}

    def test_default_interval_is_daily(self, api_client, upstream):
        upstream.respond_with(make_chart_payload(trading_days(date(2024, 1, 1), 3)))

        body = api_client.get("/api/chart", params={"symbol": "INFY"}).json()

        assert body["interval"] == "daily"
        assert body["period"] == "YTD"
        assert body["count"] == 3
        assert isinstance(body["bars"][0]["time"], int)

    def test_unknown_interval(self, api_client, upstream):
        response = api_client.get("/api/chart", params={"symbol": "INFY", "interval": "hourly"})

        assert response.status_code == 400
        assert "hourly" in response.json()["details"]
        assert upstream.call_count == 0

    def test_missing_symbol(self, api_client):
        response = api_client.get("/api/chart", params={"interval": "weekly"})

        assert response.status_code == 400
        assert response.json() == {"details": "Symbol is required"}

    def test_upstream_errors_pass_through(self, api_client, upstream):
        upstream.respond_with({}, status_code=429)

        response = api_client.get("/api/chart", params={"symbol": "INFY"})

        assert response.status_code == 429

    def test_periods(self, api_client):
        body = api_client.get("/api/chart/periods").json()

        assert [p["label"] for p in body["periods"]] == ["YTD", "1M", "3M", "6M", "1Y", "2Y", "5Y", "Max"]
        assert body["interval_defaults"] == {"daily": "YTD", "weekly": "2Y", "monthly": "5Y"}


class TestServiceRoutes:

    def test_health(self, api_client):
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, api_client):
        assert api_client.get("/").json()["status"] == "running"
