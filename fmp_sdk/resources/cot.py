"""COTResource: CFTC Commitment of Traders reports."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class COTResource(BaseResource):

    def get_report(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "v4/commitment_of_traders_report",
            {"symbol": self._symbol(symbol), **self._date_range(from_date, to_date)},
        )

    def get_analysis(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        """Positioning analysis (net positions, sentiment, reversal trends)."""
        return self._get(
            "v4/commitment_of_traders_report_analysis",
            {"symbol": self._symbol(symbol), **self._date_range(from_date, to_date)},
        )

    def get_symbols(self) -> list[dict[str, Any]]:
        return self._get("v4/commitment_of_traders_report/list")
