from fastapi import APIRouter, Query

from marketdash.schemas.error import ErrorResponse
from marketdash.schemas.history import HistoryResponse
from marketdash.services.history_service import get_history as get_history_data

router = APIRouter(prefix="/api", tags=["history"])


@router.get(
    "/history",
    response_model=HistoryResponse,
    summary="Get daily closing prices",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_history(
    ticker: str = Query("", description="Ticker symbol, e.g. AAPL"),
    range: str | None = Query(None, description="One of 1m, 3m, 6m, 1y (default 1y)"),
):
    """Return daily closes for the chart, oldest first.

    Supported ranges: `1m`, `3m`, `6m`, `1y` (default).
    """
    return await get_history_data(ticker, range)
