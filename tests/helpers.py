"""Shared test helpers for faking Yahoo lookups."""

import asyncio
from datetime import date

import pandas as pd

from marketdash.services.yahoo import RawQuote


def make_quote(
    short_name: str | None = None,
    long_name: str | None = None,
    price: float | None = 100.0,
    change: float | None = 1.0,
    change_pct: float | None = 0.01,
    currency: str | None = "USD",
) -> RawQuote:
    """Build a RawQuote the way fetch_quote returns it."""
    return RawQuote(
        short_name=short_name,
        long_name=long_name,
        regular_market_price=price,
        regular_market_change=change,
        regular_market_change_percent=change_pct,
        currency=currency,
        market_state="REGULAR",
    )


class FakeQuoteFetcher:
    """Async stand-in for fetch_quote.

    ``outcomes`` maps a symbol to a RawQuote or an exception instance (or to a
    list of those, consumed one per call). ``delays`` adds a per-symbol sleep
    so tests can force lookups to finish out of request order.
    """

    def __init__(self, outcomes: dict, delays: dict[str, float] | None = None):
        self.outcomes = {k: list(v) if isinstance(v, list) else v for k, v in outcomes.items()}
        self.delays = delays or {}
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, symbol: str) -> RawQuote:
        self.calls.append(symbol)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(symbol, 0))
        finally:
            self.in_flight -= 1

        outcome = self.outcomes[symbol]
        if isinstance(outcome, list):
            outcome = outcome.pop(0)
        self.completed.append(symbol)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def make_yahoo_history_df(
    symbol: str = "AAPL",
    closes: list[float] | None = None,
    end: date = date(2025, 1, 10),
) -> pd.DataFrame:
    """Create a (symbol, date) MultiIndex frame like yahooquery's history()."""
    closes = closes if closes is not None else [100.0, 101.5, 99.25]
    dates = [d.date() for d in pd.bdate_range(end=end, periods=len(closes))]
    return pd.DataFrame(
        {
            "open": [c - 0.5 for c in closes],
            "high": [c + 1.0 for c in closes],
            "low": [c - 1.0 for c in closes],
            "close": closes,
            "volume": [1_000_000] * len(closes),
        },
        index=pd.MultiIndex.from_tuples(
            [(symbol, d) for d in dates], names=["symbol", "date"]
        ),
    )
