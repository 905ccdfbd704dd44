"""EconomicsResource: treasury rates, macro indicators and market risk premium."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import EconomicIndicator
from fmp_sdk.resources.base import BaseResource


class EconomicsResource(BaseResource):

    def get_treasury_rates(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get("v4/treasury", self._date_range(from_date, to_date))

    def get_indicator(
        self,
        name: EconomicIndicator | str,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> list[dict[str, Any]]:
        """Time series for one macro indicator, e.g. ``EconomicIndicator.CPI``."""
        return self._get("v4/economic", {"name": str(name), **self._date_range(from_date, to_date)})

    def get_gdp(self, from_date: str | None = None, to_date: str | None = None) -> list[dict[str, Any]]:
        return self.get_indicator(EconomicIndicator.GDP, from_date, to_date)

    def get_cpi(self, from_date: str | None = None, to_date: str | None = None) -> list[dict[str, Any]]:
        return self.get_indicator(EconomicIndicator.CPI, from_date, to_date)

    def get_inflation_rate(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self.get_indicator(EconomicIndicator.INFLATION_RATE, from_date, to_date)

    def get_unemployment_rate(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self.get_indicator(EconomicIndicator.UNEMPLOYMENT_RATE, from_date, to_date)

    def get_federal_funds_rate(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self.get_indicator(EconomicIndicator.FEDERAL_FUNDS, from_date, to_date)

    def get_market_risk_premium(self) -> list[dict[str, Any]]:
        return self._get("v4/market_risk_premium")
