from fastapi import APIRouter, Query

from marketdash.schemas.analyst import AnalystResponse
from marketdash.schemas.error import ErrorResponse
from marketdash.services.analyst_service import get_analyst_summary

router = APIRouter(prefix="/api", tags=["analyst"])


@router.get(
    "/analyst",
    response_model=AnalystResponse,
    summary="Get analyst price targets and ratings",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_analyst(ticker: str = Query("", description="Ticker symbol, e.g. AAPL")):
    """Return analyst price targets, the consensus rating, monthly rating
    counts and the most recent upgrades/downgrades for a ticker."""
    return await get_analyst_summary(ticker)
