"""PerformanceResource: market movers and sector/industry performance."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class PerformanceResource(BaseResource):

    def get_gainers(self) -> list[dict[str, Any]]:
        return self._get("stock-market-gainers")

    def get_losers(self) -> list[dict[str, Any]]:
        return self._get("stock-market-losers")

    def get_most_active(self) -> list[dict[str, Any]]:
        return self._get("stock-market-actives")

    def get_sector_performance(self, limit: int | None = None) -> list[dict[str, Any]]:
        return self._get("sector-performance", self._compact(limit=limit))

    def get_historical_sector_performance(
        self, sector: str, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "historical-sector-performance", {"sector": sector, **self._compact(limit=limit)}
        )

    def get_sector_pe(self, date: str, exchange: str | None = None) -> list[dict[str, Any]]:
        """Sector P/E ratios as of ``date`` (``YYYY-MM-DD``)."""
        return self._get(
            "sector-price-earning-ratio", {"date": date, **self._compact(exchange=exchange)}
        )

    def get_industry_pe(self, date: str, exchange: str | None = None) -> list[dict[str, Any]]:
        return self._get(
            "industry-price-earning-ratio", {"date": date, **self._compact(exchange=exchange)}
        )

    def get_historical_sector_pe(self, sector: str) -> list[dict[str, Any]]:
        return self._get("historical-sector-pe", {"sector": sector})

    def get_historical_industry_pe(self, industry: str) -> list[dict[str, Any]]:
        return self._get("historical-industry-pe", {"industry": industry})
