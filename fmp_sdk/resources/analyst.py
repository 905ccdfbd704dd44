"""AnalystResource: estimates, price targets, grades and ratings."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import Period
from fmp_sdk.resources.base import BaseResource


class AnalystResource(BaseResource):
    """Wall Street analyst coverage.

    Summary-style endpoints (price target summary/consensus, grades
    consensus/summary, ratings snapshot) answer with a one-item list; those
    methods return the single object, or None when the list is empty.
    """

    def get_analyst_estimates(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        params = {"symbol": self._symbol(symbol), "period": str(period), **self._compact(limit=limit)}
        return self._get("analyst-estimates", params)

    def get_price_targets(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("price-target", {"symbol": self._symbol(symbol)})

    def get_price_target_summary(self, symbol: str) -> dict[str, Any] | None:
        return self._first(self._get("price-target-summary", {"symbol": self._symbol(symbol)}))

    def get_price_target_consensus(self, symbol: str) -> dict[str, Any] | None:
        return self._first(self._get("price-target-consensus", {"symbol": self._symbol(symbol)}))

    def get_analyst_recommendations(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("analyst-stock-recommendations", {"symbol": self._symbol(symbol)})

    def get_stock_grades(self, symbol: str, limit: int | None = None) -> list[dict[str, Any]]:
        """Individual upgrade/downgrade actions, newest first."""
        params = {"symbol": self._symbol(symbol), **self._compact(limit=limit)}
        return self._get("grades", params)

    def get_historical_stock_grades(
        self, symbol: str, limit: int | None = None
    ) -> list[dict[str, Any]]:
        params = {"symbol": self._symbol(symbol), **self._compact(limit=limit)}
        return self._get("grades-historical", params)

    def get_upgrades_downgrades_consensus(self, symbol: str) -> dict[str, Any] | None:
        return self._first(self._get("grades-consensus", {"symbol": self._symbol(symbol)}))

    def get_stock_grades_summary(self, symbol: str) -> dict[str, Any] | None:
        return self._first(self._get("grades-summary", {"symbol": self._symbol(symbol)}))

    def get_ratings_snapshot(self, symbol: str) -> dict[str, Any] | None:
        return self._first(self._get("rating", {"symbol": self._symbol(symbol)}))
