from typing import Any

from pydantic import Field

from marketdash.schemas._base import CamelModel


class AnalystTargets(CamelModel):
    mean: float | None = Field(default=None, description="Mean analyst price target")
    high: float | None = Field(default=None, description="Highest analyst price target")
    low: float | None = Field(default=None, description="Lowest analyst price target")
    analyst_count: int | None = Field(default=None, description="Number of analyst opinions")


class AnalystConsensus(CamelModel):
    recommendation_key: str | None = Field(default=None, description="Consensus label, e.g. buy, hold")
    recommendation_mean: float | None = Field(default=None, description="Mean rating (1 = strong buy, 5 = sell)")


class RecommendationTrend(CamelModel):
    period: str = Field(description="Relative period, e.g. 0m (current month), -1m")
    strong_buy: int = 0
    buy: int = 0
    hold: int = 0
    sell: int = 0
    strong_sell: int = 0


class AnalystResponse(CamelModel):
    ticker: str = Field(description="Requested ticker symbol")
    targets: AnalystTargets
    consensus: AnalystConsensus
    trend: list[RecommendationTrend] = Field(default_factory=list, description="Rating counts per period")
    upgrades: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Most recent upgrade/downgrade events, passed through from the provider",
    )
