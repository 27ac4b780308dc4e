"""Yahoo Finance analyst data (price targets, ratings, upgrades/downgrades)."""

from yahooquery import Ticker

from marketdash.constants import ANALYST_MODULES
from marketdash.errors import UpstreamLookupError
from marketdash.utils import async_threadable


@async_threadable
def fetch_analyst_summary(symbol: str) -> dict:
    """Fetch the raw quoteSummary modules used by the analyst view.

    Returns ``{module_name: module_data}`` for whichever of ANALYST_MODULES
    Yahoo has for the symbol.
    """
    ticker = Ticker(symbol)
    data = ticker.get_modules(ANALYST_MODULES)

    summary = data.get(symbol) if isinstance(data, dict) else data
    if isinstance(summary, dict):
        return summary
    if isinstance(summary, str) and summary.strip():
        raise UpstreamLookupError(symbol, summary.strip())
    raise UpstreamLookupError(symbol, f"No analyst data for {symbol}")
