"""ETFResource: ETF holdings, weightings and mutual fund data."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class ETFResource(BaseResource):

    def get_holdings(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/etf-holder/{self._symbol(symbol)}")

    def get_info(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("v4/etf-info", {"symbol": self._symbol(symbol)})

    def get_sector_weightings(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/etf-sector-weightings/{self._symbol(symbol)}")

    def get_country_weightings(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/etf-country-weightings/{self._symbol(symbol)}")

    def get_stock_exposure(self, symbol: str) -> list[dict[str, Any]]:
        """ETFs that hold ``symbol``, with weights."""
        return self._get(f"v3/etf-stock-exposure/{self._symbol(symbol)}")

    def get_mutual_fund_holders(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/mutual-fund-holder/{self._symbol(symbol)}")

    def get_etf_list(self) -> list[dict[str, Any]]:
        return self._get("v3/etf/list")

    def get_available_mutual_funds(self) -> list[dict[str, Any]]:
        return self._get("v3/symbol/available-mutual-funds")

    def get_latest_disclosures(self) -> list[dict[str, Any]]:
        return self._get("v4/etf-holdings/portfolio-date")
