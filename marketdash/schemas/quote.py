from typing import Literal, Union

from pydantic import Field

from marketdash.schemas._base import CamelModel


class QuoteResponse(CamelModel):
    ticker: str = Field(description="Requested ticker symbol (e.g. AAPL)")
    name: str = Field(description="Short name, falling back to long name, then the ticker")
    price: float | None = Field(default=None, description="Latest traded price")
    change: float | None = Field(default=None, description="Absolute price change from previous close")
    change_percent: float | None = Field(default=None, description="Percentage change from previous close")
    currency: str | None = Field(default=None, description="ISO 4217 currency code as reported by the provider")


class BatchQuoteSuccess(CamelModel):
    ok: Literal[True] = True
    ticker: str = Field(description="Requested ticker symbol, echoed verbatim")
    name: str = Field(description="Short name, falling back to long name, then the ticker")
    price: float | None = Field(default=None, description="Latest traded price")
    change_percent: float | None = Field(default=None, description="Percentage change from previous close")
    currency: str | None = Field(default=None, description="ISO 4217 currency code")


class BatchQuoteFailure(CamelModel):
    ok: Literal[False] = False
    ticker: str = Field(description="Requested ticker symbol, echoed verbatim")
    error: str = Field(description="Why the lookup for this ticker failed")


class BatchQuoteResponse(CamelModel):
    data: list[Union[BatchQuoteSuccess, BatchQuoteFailure]] = Field(
        description="One entry per requested ticker, in request order",
    )
