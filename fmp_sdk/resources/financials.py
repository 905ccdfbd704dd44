"""FinancialsResource: statements, ratios, growth, segments and reports."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import Period
from fmp_sdk.resources.base import BaseResource


class FinancialsResource(BaseResource):
    """Financial statements and derived metrics.

    Statement methods take a ``period`` (annual by default) and an optional
    ``limit`` on the number of periods returned.
    """

    def _statement(
        self, name: str, symbol: str, period: Period | str, limit: int | None
    ) -> list[dict[str, Any]]:
        params = {"period": str(period), **self._compact(limit=limit)}
        return self._get(f"v3/{name}/{self._symbol(symbol)}", params)

    # -- Statements --

    def get_income_statement(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("income-statement", symbol, period, limit)

    def get_balance_sheet(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("balance-sheet-statement", symbol, period, limit)

    def get_cash_flow_statement(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("cash-flow-statement", symbol, period, limit)

    def get_income_statement_ttm(self, symbol: str, limit: int | None = None) -> list[dict[str, Any]]:
        """Trailing-twelve-month income statement."""
        return self._statement("income-statement", symbol, "ttm", limit)

    def get_balance_sheet_ttm(self, symbol: str, limit: int | None = None) -> list[dict[str, Any]]:
        return self._statement("balance-sheet-statement", symbol, "ttm", limit)

    def get_cash_flow_statement_ttm(self, symbol: str, limit: int | None = None) -> list[dict[str, Any]]:
        return self._statement("cash-flow-statement", symbol, "ttm", limit)

    # -- Ratios & metrics --

    def get_financial_ratios(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("ratios", symbol, period, limit)

    def get_key_metrics(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("key-metrics", symbol, period, limit)

    def get_enterprise_value(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("enterprise-values", symbol, period, limit)

    def get_financial_ratios_ttm(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/ratios-ttm/{self._symbol(symbol)}")

    def get_key_metrics_ttm(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/key-metrics-ttm/{self._symbol(symbol)}")

    def get_financial_scores(self, symbol: str) -> list[dict[str, Any]]:
        """Altman Z-score and Piotroski score."""
        return self._get("v4/score", {"symbol": self._symbol(symbol)})

    def get_owner_earnings(self, symbol: str, limit: int | None = None) -> list[dict[str, Any]]:
        params = {"symbol": self._symbol(symbol), **self._compact(limit=limit)}
        return self._get("v4/owner_earnings", params)

    # -- Growth --

    def get_income_statement_growth(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("income-statement-growth", symbol, period, limit)

    def get_balance_sheet_growth(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("balance-sheet-statement-growth", symbol, period, limit)

    def get_cash_flow_growth(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("cash-flow-statement-growth", symbol, period, limit)

    def get_financial_growth(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("financial-growth", symbol, period, limit)

    # -- As reported --

    def get_income_statement_as_reported(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("income-statement-as-reported", symbol, period, limit)

    def get_balance_sheet_as_reported(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("balance-sheet-statement-as-reported", symbol, period, limit)

    def get_cash_flow_statement_as_reported(
        self, symbol: str, period: Period | str = Period.ANNUAL, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._statement("cash-flow-statement-as-reported", symbol, period, limit)

    def get_full_financial_statement_as_reported(
        self, symbol: str, period: Period | str = Period.ANNUAL
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/financial-statement-full-as-reported/{self._symbol(symbol)}",
            {"period": str(period)},
        )

    def get_latest_financial_statement(
        self, symbol: str, period: Period | str = Period.ANNUAL
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v4/financial-statement-full-as-reported/{self._symbol(symbol)}",
            {"period": str(period)},
        )

    # -- Segments & reports --

    def get_revenue_by_product(
        self, symbol: str, period: Period | str = Period.ANNUAL
    ) -> list[dict[str, Any]]:
        return self._get(
            "v4/revenue-product-segmentation",
            {"symbol": self._symbol(symbol), "period": str(period), "structure": "flat"},
        )

    def get_revenue_by_geography(
        self, symbol: str, period: Period | str = Period.ANNUAL
    ) -> list[dict[str, Any]]:
        return self._get(
            "v4/revenue-geographic-segmentation",
            {"symbol": self._symbol(symbol), "period": str(period), "structure": "flat"},
        )

    def get_financial_report_dates(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("v4/financial-reports-dates", {"symbol": self._symbol(symbol)})

    def get_financial_report_json(self, symbol: str, year: int, period: str = "FY") -> Any:
        """10-K/10-Q report as JSON. ``period`` is ``FY`` or ``Q1``..``Q4``."""
        return self._get(
            "v4/financial-reports-json",
            {"symbol": self._symbol(symbol), "year": year, "period": period},
        )

    def get_financial_report_xlsx(self, symbol: str, year: int, period: str = "FY") -> Any:
        return self._get(
            "v4/financial-reports-xlsx",
            {"symbol": self._symbol(symbol), "year": year, "period": period},
        )
