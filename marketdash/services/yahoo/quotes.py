"""Yahoo Finance single-symbol quote lookup."""

import logging

from yahooquery import Ticker

from marketdash.errors import UpstreamLookupError
from marketdash.schemas._base import CamelModel
from marketdash.utils import async_threadable

logger = logging.getLogger(__name__)


class RawQuote(CamelModel):
    """Yahoo price-module payload. Every field may be absent."""

    short_name: str | None = None
    long_name: str | None = None
    regular_market_price: float | None = None
    regular_market_change: float | None = None
    regular_market_change_percent: float | None = None
    currency: str | None = None
    market_state: str | None = None

    def display_name(self, fallback: str) -> str:
        """Short name, else long name, else ``fallback``. Blank names are skipped."""
        for candidate in (self.short_name, self.long_name):
            if candidate is not None and candidate.strip():
                return candidate
        return fallback


def _extract_price_info(symbol: str, price_data: object) -> dict:
    """Pick the symbol's entry out of ``Ticker.price``, raising on error payloads."""
    info = price_data.get(symbol) if isinstance(price_data, dict) else None
    if isinstance(info, dict):
        return info
    # Yahoo reports per-symbol failures as plain strings, e.g. "Quote not found ..."
    if isinstance(info, str) and info.strip():
        raise UpstreamLookupError(symbol, info.strip())
    raise UpstreamLookupError(symbol, f"No quote data for {symbol}")


@async_threadable
def fetch_quote(symbol: str) -> RawQuote:
    """Fetch the latest quote for one symbol.

    Raises UpstreamLookupError when Yahoo has no data for the symbol, and
    pydantic.ValidationError when the payload has malformed fields.
    """
    ticker = Ticker(symbol)
    info = _extract_price_info(symbol, ticker.price)
    quote = RawQuote.model_validate(info)

    if quote.regular_market_price is None and quote.market_state is None:
        logger.warning("Yahoo returned an empty quote for %s", symbol)

    return quote
