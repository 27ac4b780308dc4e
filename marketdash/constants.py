"""Shared constants for history ranges and analyst payloads."""

# Calendar days looked back for each range (a little over the nominal length
# so the first trading day of the window is always included).
RANGE_DAYS: dict[str, int] = {
    "1m": 31,
    "3m": 93,
    "6m": 186,
    "1y": 366,
}

# Yahoo quoteSummary modules requested for the analyst view.
ANALYST_MODULES: list[str] = [
    "financialData",
    "recommendationTrend",
    "upgradeDowngradeHistory",
]
