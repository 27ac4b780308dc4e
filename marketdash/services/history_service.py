"""Price history endpoint logic: range resolution and close-series shaping."""

import logging
from datetime import date, timedelta

from marketdash.config import settings
from marketdash.constants import RANGE_DAYS
from marketdash.errors import InvalidRequestError, UpstreamFetchError, error_message
from marketdash.services.tickers import normalize_ticker
from marketdash.services.yahoo import fetch_history

logger = logging.getLogger(__name__)


def resolve_range(range_: str | None) -> str:
    """Normalise a range key (case-insensitive), defaulting to the configured one."""
    key = (range_ or settings.default_history_range).strip().lower()
    if key not in RANGE_DAYS:
        raise InvalidRequestError("Invalid range")
    return key


def range_window(range_: str, today: date | None = None) -> tuple[date, date]:
    """Return the (start, end) dates covered by a range key."""
    end = today or date.today()
    return end - timedelta(days=RANGE_DAYS[range_]), end


async def get_history(ticker: str | None, range_: str | None = None) -> dict:
    """Return daily closes for ``ticker`` over ``range_``.

    The ticker is validated before the range, so a request missing both
    reports the missing ticker.
    """
    symbol = normalize_ticker(ticker)
    key = resolve_range(range_)
    start, end = range_window(key)

    try:
        points = await fetch_history(symbol, start=start, end=end)
    except Exception as exc:
        logger.error("History lookup failed for %s (%s): %s", symbol, key, exc)
        raise UpstreamFetchError("Failed to fetch history", error_message(exc)) from exc

    return {
        "ticker": symbol,
        "range": key,
        "data": [{"date": day, "close": close} for day, close in points],
    }
