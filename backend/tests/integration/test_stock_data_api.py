"""Integration Tests for GET /api/stockData

Exercises the HTTP contract through the FastAPI app with the upstream
provider replaced by an httpx.MockTransport.
"""
import pytest
from datetime import date

from tests.fixtures.synthetic_data import make_chart_payload, trading_days


PARAMS = {
    "symbol": "RELIANCE",
    "startDate": "2024-01-01T00:00:00.000Z",
    "endDate": "2024-03-31T00:00:00.000Z",
}


class TestStockDataSuccess:

    def test_returns_daily_bars(self, api_client, upstream):
        upstream.respond_with(make_chart_payload(trading_days(date(2024, 1, 15), 2)))

        response = api_client.get("/api/stockData", params=PARAMS)

        assert response.status_code == 200
        assert response.json() == [
            {"time": "2024-01-15", "open": 100.12, "high": 102.46, "low": 98.21, "close": 100.5, "volume": 10000},
            {"time": "2024-01-16", "open": 101.12, "high": 103.46, "low": 99.21, "close": 101.5, "volume": 10100},
        ]

    def test_repeat_request_hits_cache(self, api_client, upstream):
        upstream.respond_with(make_chart_payload(trading_days(date(2024, 1, 15), 5)))

        first = api_client.get("/api/stockData", params=PARAMS)
        second = api_client.get("/api/stockData", params=PARAMS)

        assert first.json() == second.json()
        assert upstream.call_count == 1

    def test_zero_volume_row_kept(self, api_client, upstream):
        upstream.respond_with(
            make_chart_payload(trading_days(date(2024, 1, 15), 3), overrides={2: {"volume": 0}})
        )

        response = api_client.get("/api/stockData", params=PARAMS)

        assert [bar["volume"] for bar in response.json()] == [10000, 10100, 0]

    def test_dates_optional(self, api_client, upstream):
        upstream.respond_with(make_chart_payload(trading_days(date(2024, 1, 15), 1)))

        response = api_client.get("/api/stockData", params={"symbol": "TCS"})

        assert response.status_code == 200
        assert upstream.call_count == 1


class TestStockDataErrors:

    def test_missing_symbol(self, api_client, upstream):
        response = api_client.get("/api/stockData", params={"startDate": PARAMS["startDate"]})

        assert response.status_code == 400
        assert response.json() == {"details": "Symbol is required"}
        assert upstream.call_count == 0

    @pytest.mark.parametrize("method", ["post", "put", "patch", "delete", "options", "trace"])
    def test_non_get_method(self, api_client, upstream, method):
        response = api_client.request(method.upper(), "/api/stockData", params=PARAMS)

        assert response.status_code == 405
        assert response.json() == {"details": "Method not allowed"}
        assert upstream.call_count == 0

    def test_invalid_date(self, api_client):
        response = api_client.get("/api/stockData", params={**PARAMS, "startDate": "31/01/2024"})

        assert response.status_code == 400
        assert response.json()["details"].startswith("Invalid date")

    def test_no_chart_result(self, api_client, upstream):
        upstream.respond_with({"chart": {"result": None, "error": None}})

        response = api_client.get("/api/stockData", params=PARAMS)

        assert response.status_code == 404
        assert response.json() == {"details": "No data available for this symbol"}

    def test_symbol_not_found(self, api_client, upstream):
        upstream.respond_with({"chart": {"result": None}}, status_code=404)

        response = api_client.get("/api/stockData", params=PARAMS)

        assert response.status_code == 404
        assert response.json() == {"details": "Stock symbol not found"}

    def test_rate_limited(self, api_client, upstream):
        upstream.respond_with({}, status_code=429)

        response = api_client.get("/api/stockData", params=PARAMS)

        assert response.status_code == 429
        assert response.json() == {"details": "Too many requests. Please try again later."}

    def test_other_upstream_failure(self, api_client, upstream):
        upstream.respond_with({}, status_code=500)

        response = api_client.get("/api/stockData", params=PARAMS)

        assert response.status_code == 500
        body = response.json()
        assert body["details"] == "Error fetching stock data"
        assert "500" in body["error"]

    def test_head_not_allowed(self, api_client, upstream):
        response = api_client.head("/api/stockData", params=PARAMS)

        assert response.status_code == 405
        assert upstream.call_count == 0

    def test_unknown_route_uses_details_key(self, api_client):
        response = api_client.get("/api/nothingHere")

        assert response.status_code == 404
        assert response.json() == {"details": "Not Found"}

    def test_end_date_before_lookback_range(self, api_client, upstream):
        response = api_client.get("/api/stockData", params={"symbol": "RELIANCE", "endDate": "0001-01-01"})

        assert response.status_code == 500
        body = response.json()
        assert body["details"] == "Error fetching stock data"
        assert "0001-01-01" in body["error"]
        assert upstream.call_count == 0

    def test_upstream_timestamp_out_of_range(self, api_client, upstream):
        payload = make_chart_payload(trading_days(date(2024, 1, 1), 5))
        payload["chart"]["result"][0]["timestamp"][0] = 10 ** 20
        upstream.respond_with(payload)

        response = api_client.get("/api/stockData", params=PARAMS)

        assert response.status_code == 500
        assert response.json()["details"] == "Error fetching stock data"

    def test_unexpected_exception_is_json(self, lenient_api_client):
        response = lenient_api_client.get("/api/stockData", params=PARAMS)

        assert response.status_code == 500
        assert response.json() == {"details": "Error fetching stock data", "error": "cache backend exploded"}
