"""Integration tests for GET /api/quote."""

from unittest.mock import AsyncMock, patch

import pytest

from marketdash.errors import UpstreamLookupError
from tests.helpers import make_quote

pytestmark = pytest.mark.asyncio(loop_scope="function")


async def test_get_quote_returns_data(client):
    quote = make_quote(short_name=None, long_name="Microsoft Corporation", price=420.0, change=2.0, change_pct=0.0048)
    with patch("marketdash.services.quote_service.fetch_quote", new_callable=AsyncMock, return_value=quote):
        resp = await client.get("/api/quote", params={"ticker": "msft"})

    assert resp.status_code == 200
    assert resp.json() == {
        "ticker": "MSFT",
        "name": "Microsoft Corporation",
        "price": 420.0,
        "change": 2.0,
        "changePercent": 0.48,
        "currency": "USD",
    }


async def test_get_quote_missing_ticker(client):
    resp = await client.get("/api/quote")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing ticker"}


async def test_get_quote_upstream_failure(client):
    err = UpstreamLookupError("ZZZZ", "Quote not found for ticker symbol: ZZZZ")
    with patch("marketdash.services.quote_service.fetch_quote", new_callable=AsyncMock, side_effect=err):
        resp = await client.get("/api/quote", params={"ticker": "ZZZZ"})

    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Failed to fetch quote",
        "details": "Quote not found for ticker symbol: ZZZZ",
    }
