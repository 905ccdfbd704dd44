"""BulkResource: whole-market datasets in a single request."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import Period
from fmp_sdk.resources.base import BaseResource


class BulkResource(BaseResource):
    """Bulk downloads. Responses are large; enable the cache for repeated use."""

    def get_all_profiles(self) -> list[dict[str, Any]]:
        return self._get("v4/profile/all")

    def get_all_ratings(self) -> list[dict[str, Any]]:
        return self._get("v4/rating")

    def get_all_dcf(self) -> list[dict[str, Any]]:
        return self._get("v4/dcf")

    def get_all_scores(self) -> list[dict[str, Any]]:
        return self._get("v4/score")

    def get_all_price_targets(self) -> list[dict[str, Any]]:
        return self._get("v4/price-target")

    def get_all_etf_holdings(self) -> list[dict[str, Any]]:
        return self._get("v4/etf-holder")

    def get_all_upgrades_downgrades(self) -> list[dict[str, Any]]:
        return self._get("v4/upgrades-downgrades")

    def get_all_key_metrics_ttm(self) -> list[dict[str, Any]]:
        return self._get("v3/key-metrics-ttm")

    def get_all_ratios_ttm(self) -> list[dict[str, Any]]:
        return self._get("v3/ratios-ttm")

    def get_all_peers(self) -> list[dict[str, Any]]:
        return self._get("v4/stock_peers")

    def get_all_earnings_surprises(self) -> list[dict[str, Any]]:
        return self._get("v3/earnings-surprises")

    # -- Statements --

    def _statements(self, endpoint: str, period: Period | str, year: int | None) -> list[dict[str, Any]]:
        return self._get(endpoint, {"period": str(period), **self._compact(year=year)})

    def get_all_income_statements(
        self, period: Period | str = Period.ANNUAL, year: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statements("v3/income-statement", period, year)

    def get_all_income_statement_growth(
        self, period: Period | str = Period.ANNUAL, year: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statements("v3/income-statement-growth", period, year)

    def get_all_balance_sheets(
        self, period: Period | str = Period.ANNUAL, year: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statements("v3/balance-sheet-statement", period, year)

    def get_all_balance_sheet_growth(
        self, period: Period | str = Period.ANNUAL, year: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statements("v3/balance-sheet-statement-growth", period, year)

    def get_all_cash_flow_statements(
        self, period: Period | str = Period.ANNUAL, year: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statements("v3/cash-flow-statement", period, year)

    def get_all_cash_flow_statement_growth(
        self, period: Period | str = Period.ANNUAL, year: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statements("v3/cash-flow-statement-growth", period, year)

    # -- End-of-day prices --

    def get_batch_eod_prices(self, date: str) -> list[dict[str, Any]]:
        """Closing prices for every symbol on ``date``."""
        return self._get("v4/batch-request-end-of-day-prices", {"date": date})

    def get_batch_eod_prices_range(self, from_date: str, to_date: str) -> list[dict[str, Any]]:
        return self._get("v4/batch-request-end-of-day-prices", {"from": from_date, "to": to_date})
