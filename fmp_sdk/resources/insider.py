"""InsiderResource: insider trades, institutional ownership and congressional trading."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class InsiderResource(BaseResource):
    """Insider, 13F and congressional disclosures."""

    # -- Insider trading --

    def get_insider_trades(self, symbol: str, limit: int | None = None) -> list[dict[str, Any]]:
        params = {"symbol": self._symbol(symbol), **self._compact(limit=limit)}
        return self._get("v4/insider-trading", params)

    def get_latest_insider_trades(self, limit: int | None = None) -> list[dict[str, Any]]:
        return self._get("v4/insider-trading", self._compact(limit=limit))

    def get_insider_trades_by_name(self, name: str, limit: int | None = None) -> list[dict[str, Any]]:
        """Trades filed by one reporting person, e.g. ``"Cook Timothy"``."""
        return self._get("v4/insider-trading", {"reportingName": name, **self._compact(limit=limit)})

    def get_insider_statistics(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("v4/insider-roaster-statistic", {"symbol": self._symbol(symbol)})

    def get_insider_roster(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("v4/insider-roaster", {"symbol": self._symbol(symbol)})

    def get_insider_transaction_types(self) -> list[Any]:
        return self._get("v4/insider-trading-transaction-type")

    def get_form4_ownership(self, symbol: str, limit: int | None = None) -> list[dict[str, Any]]:
        params = {"symbol": self._symbol(symbol), **self._compact(limit=limit)}
        return self._get("v4/form-four", params)

    # -- Institutional ownership --

    def get_institutional_holders(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/institutional-holder/{self._symbol(symbol)}")

    def get_form_13f(self, cik: str, date: str | None = None) -> list[dict[str, Any]]:
        return self._get(f"v3/form-thirteen/{cik}", self._compact(date=date))

    def get_latest_13f_filings(
        self, cik: str | None = None, page: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "v4/institutional-ownership/portfolio-date", self._compact(cik=cik, page=page)
        )

    def get_filing_dates_13f(self, cik: str) -> list[dict[str, Any]]:
        return self._get("v4/institutional-ownership/portfolio-date", {"cik": cik})

    def get_form_13f_with_analytics(
        self, cik: str, date: str | None = None, page: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(f"v4/form-thirteen/{cik}", self._compact(date=date, page=page))

    def get_portfolio_holdings_summary(
        self, cik: str, date: str | None = None, page: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "v4/institutional-ownership/portfolio-holdings-summary",
            {"cik": cik, **self._compact(date=date, page=page)},
        )

    def get_industry_portfolio_breakdown(
        self, cik: str, date: str | None = None, page: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "v4/institutional-ownership/industry/portfolio-holdings-summary",
            {"cik": cik, **self._compact(date=date, page=page)},
        )

    def get_symbol_ownership_positions(
        self,
        symbol: str,
        include_current_quarter: bool | None = None,
        page: int | None = None,
    ) -> list[dict[str, Any]]:
        """Institutional positions in ``symbol``.

        ``include_current_quarter=False`` is sent as ``false``; only None omits it.
        """
        params: dict[str, Any] = {"symbol": self._symbol(symbol)}
        if include_current_quarter is not None:
            params["includeCurrentQuarter"] = include_current_quarter
        params.update(self._compact(page=page))
        return self._get("v4/institutional-ownership/symbol-ownership", params)

    def get_industry_institutional_ownership(
        self, symbol: str, page: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "v4/institutional-ownership/institutional-holders/symbol-ownership-percent",
            {"symbol": self._symbol(symbol), **self._compact(page=page)},
        )

    # -- Congress --

    def get_senate_trades(self, symbol: str | None = None) -> list[dict[str, Any]]:
        return self._get("v4/senate-trading", self._compact(symbol=symbol and self._symbol(symbol)))

    def get_house_trades(self, symbol: str | None = None) -> list[dict[str, Any]]:
        return self._get(
            "v4/senate-disclosure", self._compact(symbol=symbol and self._symbol(symbol))
        )

    def get_latest_senate_trades(self) -> list[dict[str, Any]]:
        return self._get("v4/senate-trading-rss-feed")

    def get_latest_house_trades(self) -> list[dict[str, Any]]:
        return self._get("v4/senate-disclosure-rss-feed")

    def get_senate_trades_by_name(self, name: str) -> list[dict[str, Any]]:
        return self._get("v4/senate-trading", {"name": name})

    def get_house_trades_by_name(self, name: str) -> list[dict[str, Any]]:
        return self._get("v4/senate-disclosure", {"name": name})
