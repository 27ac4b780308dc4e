"""Analyst endpoint logic: reshapes Yahoo quoteSummary modules."""

import logging

from marketdash.config import settings
from marketdash.errors import UpstreamFetchError, error_message
from marketdash.services.tickers import normalize_ticker
from marketdash.services.yahoo import fetch_analyst_summary
from marketdash.utils import safe_float

logger = logging.getLogger(__name__)

_TREND_FIELDS = ("strongBuy", "buy", "hold", "sell", "strongSell")


def _module(summary: dict, name: str) -> dict:
    """Return a quoteSummary module as a dict ({} when missing or an error string)."""
    data = summary.get(name)
    return data if isinstance(data, dict) else {}


def _optional_int(val: object) -> int | None:
    f = safe_float(val)
    return int(f) if f is not None else None


def _parse_trend(trend: object) -> list[dict]:
    if not isinstance(trend, list):
        return []

    rows = []
    for entry in trend:
        if not isinstance(entry, dict) or not entry.get("period"):
            continue
        row = {"period": str(entry["period"])}
        for field in _TREND_FIELDS:
            row[field] = _optional_int(entry.get(field)) or 0
        rows.append(row)
    return rows


def _parse_upgrades(history: object, limit: int) -> list[dict]:
    if not isinstance(history, list):
        return []
    return [h for h in history if isinstance(h, dict)][:limit]


def build_analyst_payload(symbol: str, summary: dict, upgrade_limit: int) -> dict:
    fd = _module(summary, "financialData")
    rt = _module(summary, "recommendationTrend")
    ud = _module(summary, "upgradeDowngradeHistory")

    key = fd.get("recommendationKey")
    return {
        "ticker": symbol,
        "targets": {
            "mean": safe_float(fd.get("targetMeanPrice")),
            "high": safe_float(fd.get("targetHighPrice")),
            "low": safe_float(fd.get("targetLowPrice")),
            "analyst_count": _optional_int(fd.get("numberOfAnalystOpinions")),
        },
        "consensus": {
            "recommendation_key": key if isinstance(key, str) else None,
            "recommendation_mean": safe_float(fd.get("recommendationMean")),
        },
        "trend": _parse_trend(rt.get("trend")),
        "upgrades": _parse_upgrades(ud.get("history"), upgrade_limit),
    }


async def get_analyst_summary(ticker: str | None) -> dict:
    symbol = normalize_ticker(ticker)

    try:
        summary = await fetch_analyst_summary(symbol)
    except Exception as exc:
        logger.error("Analyst lookup failed for %s: %s", symbol, exc)
        raise UpstreamFetchError("Failed to fetch analyst data", error_message(exc)) from exc

    return build_analyst_payload(symbol, summary, settings.analyst_upgrade_limit)
