"""Single-ticker quote endpoint logic."""

import logging

from marketdash.errors import UpstreamFetchError, error_message
from marketdash.services.tickers import normalize_ticker
from marketdash.services.yahoo import fetch_quote
from marketdash.utils import safe_float

logger = logging.getLogger(__name__)


async def get_quote(ticker: str | None) -> dict:
    symbol = normalize_ticker(ticker)

    try:
        quote = await fetch_quote(symbol)
    except Exception as exc:
        logger.error("Quote lookup failed for %s: %s", symbol, exc)
        raise UpstreamFetchError("Failed to fetch quote", error_message(exc)) from exc

    return {
        "ticker": symbol,
        "name": quote.display_name(symbol),
        "price": safe_float(quote.regular_market_price, decimals=4),
        "change": safe_float(quote.regular_market_change, decimals=4),
        "change_percent": safe_float(quote.regular_market_change_percent, decimals=2, multiplier=100),
        "currency": quote.currency,
    }
