import datetime

from pydantic import Field

from marketdash.schemas._base import CamelModel


class ClosePoint(CamelModel):
    date: datetime.date = Field(description="Trading date")
    close: float = Field(description="Closing price")


class HistoryResponse(CamelModel):
    ticker: str = Field(description="Requested ticker symbol")
    range: str = Field(description="Requested range: 1m, 3m, 6m or 1y")
    data: list[ClosePoint] = Field(description="Daily closes, oldest first")
