from fastapi import APIRouter, Query

from marketdash.schemas.error import ErrorResponse
from marketdash.schemas.quote import BatchQuoteResponse, QuoteResponse
from marketdash.services.batch_service import fetch_batch
from marketdash.services.quote_service import get_quote as get_quote_data
from marketdash.services.tickers import parse_tickers

router = APIRouter(prefix="/api", tags=["quotes"])


@router.get(
    "/quote",
    response_model=QuoteResponse,
    summary="Get the latest quote for one ticker",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_quote(ticker: str = Query("", description="Ticker symbol, e.g. AAPL")):
    """Fetch the latest price, change, change percent and currency for a ticker."""
    return await get_quote_data(ticker)


@router.get(
    "/batch",
    response_model=BatchQuoteResponse,
    summary="Get quotes for several tickers at once",
    responses={400: {"model": ErrorResponse}},
)
async def get_batch(tickers: str = Query("", description="Comma-separated list of tickers")):
    """Fetch quotes for a comma-separated list of tickers (e.g. `AAPL,MSFT,NVDA`).

    Symbols are trimmed and uppercased; blank entries are ignored and
    duplicates kept. Each ticker is looked up concurrently and independently:
    the response has exactly one entry per requested ticker, in request
    order, either `{ok: true, ...quote}` or `{ok: false, ticker, error}`.
    A failing ticker never fails the request as a whole.
    """
    symbols = parse_tickers(tickers)
    return {"data": await fetch_batch(symbols)}
