"""Batch quote fan-out.

One lookup per requested ticker is started concurrently. The join waits for
every lookup to settle (success, failure or timeout) and never stops early,
so one bad symbol cannot take the rest of the batch down with it. Results
are read back task by task in request order: ``results[i]`` always belongs
to ``tickers[i]`` whatever order the lookups finished in.
"""

import asyncio
import logging

from marketdash.config import settings
from marketdash.errors import error_message
from marketdash.services.yahoo import RawQuote, fetch_quote
from marketdash.utils import dedicated_executor, safe_float

logger = logging.getLogger(__name__)

BATCH_DEADLINE_MESSAGE = "Batch deadline exceeded"


def _success(ticker: str, quote: RawQuote) -> dict:
    change_pct = safe_float(quote.regular_market_change_percent, decimals=2, multiplier=100)
    return {
        "ok": True,
        "ticker": ticker,
        "name": quote.display_name(ticker),
        "price": safe_float(quote.regular_market_price, decimals=4),
        "change_percent": change_pct,
        "currency": quote.currency,
    }


def _failure(ticker: str, message: str) -> dict:
    return {"ok": False, "ticker": ticker, "error": message}


async def _lookup(ticker: str, timeout: float) -> dict:
    """Fetch one quote and map it to a success entry. Raises on any failure."""
    try:
        quote = await asyncio.wait_for(fetch_quote(ticker), timeout=timeout)
    except asyncio.TimeoutError:
        raise TimeoutError(f"Timed out after {timeout:g}s") from None
    return _success(ticker, quote)


def _settle(ticker: str, task: asyncio.Task) -> dict:
    """Turn a finished task into a success or failure entry for ``ticker``."""
    if task.cancelled():
        return _failure(ticker, BATCH_DEADLINE_MESSAGE)
    exc = task.exception()
    if exc is None:
        return task.result()
    message = error_message(exc)
    logger.warning("Quote lookup failed for %s: %s", ticker, message)
    return _failure(ticker, message)


async def fetch_batch(
    tickers: list[str],
    *,
    quote_timeout: float | None = None,
    batch_timeout: float | None = None,
) -> list[dict]:
    """Fetch quotes for ``tickers`` concurrently.

    Returns one entry per input position, in input order. Successful entries
    have ``ok=True`` with name, price, change_percent and currency; failed
    ones have ``ok=False`` with an ``error`` message. Duplicate tickers are
    looked up independently. This function does not raise for upstream
    failures, even if every lookup fails.

    ``quote_timeout`` bounds each lookup and ``batch_timeout`` the whole
    batch; both default to the configured settings. Lookups still running
    at the batch deadline are cancelled and reported as failed.
    """
    if not tickers:
        return []

    quote_timeout = settings.quote_timeout if quote_timeout is None else quote_timeout
    batch_timeout = settings.batch_timeout if batch_timeout is None else batch_timeout

    # One worker per ticker, so every lookup starts at once and its timeout
    # only runs while its own upstream call does.
    with dedicated_executor(len(tickers), thread_name_prefix="quote-batch"):
        tasks = [asyncio.create_task(_lookup(t, quote_timeout)) for t in tickers]
        try:
            _, pending = await asyncio.wait(tasks, timeout=batch_timeout)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            raise

        if pending:
            logger.warning(
                "Batch deadline of %ss hit with %d/%d lookups pending",
                batch_timeout, len(pending), len(tasks),
            )
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

    results = [_settle(ticker, task) for ticker, task in zip(tickers, tasks)]

    failed = sum(1 for r in results if not r["ok"])
    logger.info("Batch quote: %d ok, %d failed", len(results) - failed, failed)
    return results
