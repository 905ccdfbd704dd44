"""ValuationResource: discounted cash flow valuations."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import Period
from fmp_sdk.resources.base import BaseResource


class ValuationResource(BaseResource):
    """DCF models computed by the API."""

    def get_dcf(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("discounted-cash-flow", {"symbol": self._symbol(symbol)})

    def get_levered_dcf(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("levered-discounted-cash-flow", {"symbol": self._symbol(symbol)})

    def get_advanced_dcf(self, symbol: str) -> list[dict[str, Any]]:
        """DCF with the full projection breakdown (revenue, EBITDA, WACC, ...)."""
        return self._get("custom-discounted-cash-flow", {"symbol": self._symbol(symbol)})

    def get_custom_levered_dcf(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("custom-levered-discounted-cash-flow", {"symbol": self._symbol(symbol)})

    def get_historical_daily_dcf(
        self, symbol: str, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "historical-daily-discounted-cash-flow",
            {"symbol": self._symbol(symbol), **self._compact(limit=limit)},
        )

    def get_historical_dcf(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "historical-discounted-cash-flow-statement",
            {"symbol": self._symbol(symbol), "period": str(period), **self._compact(limit=limit)},
        )
