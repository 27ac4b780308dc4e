"""Yahoo Finance daily close history."""

import datetime

import pandas as pd
from yahooquery import Ticker

from marketdash.errors import UpstreamLookupError
from marketdash.utils import async_threadable, safe_float


def _to_date(value: object) -> datetime.date | None:
    """Normalise a history index value (date, datetime or Timestamp) to a date."""
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError):
        return None
    if pd.isna(ts):
        return None
    return ts.date()


def _close_series(df: pd.DataFrame) -> list[tuple[datetime.date, float]]:
    """Extract (date, close) pairs, dropping rows without a date or a numeric close."""
    if "close" not in df.columns:
        return []

    points = []
    for idx, close in df["close"].items():
        day = _to_date(idx)
        value = safe_float(close)
        if day is None or value is None:
            continue
        points.append((day, value))
    points.sort(key=lambda p: p[0])
    return points


@async_threadable
def fetch_history(
    symbol: str,
    start: datetime.date,
    end: datetime.date,
    interval: str = "1d",
) -> list[tuple[datetime.date, float]]:
    """Fetch closing prices for ``symbol`` from ``start`` through ``end`` (inclusive).

    Returns (date, close) pairs, oldest first. Raises UpstreamLookupError if
    Yahoo returns no rows.
    """
    ticker = Ticker(symbol)
    # yahooquery treats end as exclusive
    df = ticker.history(start=str(start), end=str(end + datetime.timedelta(days=1)), interval=interval)

    # yahooquery returns a dict of error messages instead of a frame on failure
    if isinstance(df, dict):
        message = df.get(symbol)
        if not isinstance(message, str) or not message.strip():
            message = f"No data found for {symbol}"
        raise UpstreamLookupError(symbol, message)
    if df.empty:
        raise UpstreamLookupError(symbol, f"No data found for {symbol}")

    if isinstance(df.index, pd.MultiIndex):
        df = df.reset_index().set_index("date")

    return _close_series(df)
