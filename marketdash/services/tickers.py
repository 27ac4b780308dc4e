"""Ticker symbol parsing shared by all endpoints."""

from marketdash.errors import MissingInputError


def parse_tickers(raw: str | None) -> list[str]:
    """Parse a comma-separated ticker list.

    Pieces are trimmed and uppercased and empty pieces dropped. Order and
    duplicates are kept, so ``"  aapl , MSFT,, msft "`` parses to
    ``["AAPL", "MSFT", "MSFT"]``.

    Raises MissingInputError if no symbol is left.
    """
    tickers = [t.strip().upper() for t in (raw or "").split(",") if t.strip()]
    if not tickers:
        raise MissingInputError("Missing tickers")
    return tickers


def normalize_ticker(raw: str | None) -> str:
    """Normalize a single ticker, raising MissingInputError if it is blank."""
    ticker = (raw or "").strip().upper()
    if not ticker:
        raise MissingInputError("Missing ticker")
    return ticker
