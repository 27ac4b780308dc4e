"""Yahoo Finance lookups via yahooquery.

Each module wraps one single-shot provider call:
- quotes: latest quote for one symbol (price module)
- history: daily closes for one symbol over a date window
- analyst: analyst targets, consensus and rating changes (quoteSummary modules)

Calls are blocking under the hood and exposed as coroutines through
``async_threadable``. None of them retry or cache.

Public functions are re-exported here:
    from marketdash.services.yahoo import <name>
"""

from marketdash.services.yahoo.analyst import fetch_analyst_summary
from marketdash.services.yahoo.history import fetch_history
from marketdash.services.yahoo.quotes import RawQuote, fetch_quote

__all__ = [
    # quotes
    "RawQuote",
    "fetch_quote",
    # history
    "fetch_history",
    # analyst
    "fetch_analyst_summary",
]
