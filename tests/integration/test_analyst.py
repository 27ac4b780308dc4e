"""Integration tests for GET /api/analyst."""

from unittest.mock import AsyncMock, patch

import pytest

pytestmark = pytest.mark.asyncio(loop_scope="function")

_SUMMARY = {
    "financialData": {
        "targetMeanPrice": 245.3,
        "targetHighPrice": 300.0,
        "targetLowPrice": 180.0,
        "numberOfAnalystOpinions": 41,
        "recommendationKey": "buy",
        "recommendationMean": 1.9,
    },
    "recommendationTrend": {
        "trend": [{"period": "0m", "strongBuy": 8, "buy": 22, "hold": 10, "sell": 1, "strongSell": 0}],
    },
    "upgradeDowngradeHistory": {
        "history": [
            {"epochGradeDate": 1735689600, "firm": "Morgan Stanley", "toGrade": "Overweight",
             "fromGrade": "Overweight", "action": "main"},
        ],
    },
}


async def test_analyst_returns_camel_case_payload(client):
    with patch(
        "marketdash.services.analyst_service.fetch_analyst_summary",
        new_callable=AsyncMock,
        return_value=_SUMMARY,
    ):
        resp = await client.get("/api/analyst", params={"ticker": "aapl"})

    assert resp.status_code == 200
    assert resp.json() == {
        "ticker": "AAPL",
        "targets": {"mean": 245.3, "high": 300.0, "low": 180.0, "analystCount": 41},
        "consensus": {"recommendationKey": "buy", "recommendationMean": 1.9},
        "trend": [{"period": "0m", "strongBuy": 8, "buy": 22, "hold": 10, "sell": 1, "strongSell": 0}],
        "upgrades": _SUMMARY["upgradeDowngradeHistory"]["history"],
    }


async def test_analyst_missing_ticker(client):
    resp = await client.get("/api/analyst", params={"ticker": "  "})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing ticker"}


async def test_analyst_upstream_failure(client):
    with patch(
        "marketdash.services.analyst_service.fetch_analyst_summary",
        new_callable=AsyncMock,
        side_effect=RuntimeError("HTTP 404"),
    ):
        resp = await client.get("/api/analyst", params={"ticker": "ZZZZ"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch analyst data", "details": "HTTP 404"}
