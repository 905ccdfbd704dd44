"""CompanyResource: profiles, quotes, symbol lists and corporate reference data."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class CompanyResource(BaseResource):
    """Company profiles, quotes and symbol directories."""

    # -- Profiles & quotes --

    def get_profile(self, symbol: str) -> list[dict[str, Any]]:
        """Company profile, e.g. ``get_profile("AAPL")``."""
        return self._get("profile", {"symbol": self._symbol(symbol)})

    def get_profile_by_cik(self, cik: str) -> list[dict[str, Any]]:
        return self._get("profile-cik", {"cik": cik})

    def get_quote(self, symbol: str) -> list[dict[str, Any]]:
        """Real-time quote (never cached by the default TTL table)."""
        return self._get("quote", {"symbol": self._symbol(symbol)})

    def get_quotes(self, symbols: list[str]) -> list[dict[str, Any]]:
        """Quotes for several symbols in one call."""
        return self._get("batch-quote", {"symbols": self._symbols(symbols)})

    def get_quote_short(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("quote-short", {"symbol": self._symbol(symbol)})

    def get_batch_quotes_short(self, symbols: list[str]) -> list[dict[str, Any]]:
        return self._get("quote-short", {"symbol": self._symbols(symbols)})

    def get_aftermarket_trade(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("aftermarket-trade", {"symbol": self._symbol(symbol)})

    def get_aftermarket_quote(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("aftermarket-quote", {"symbol": self._symbol(symbol)})

    def get_batch_aftermarket_quotes(self, symbols: list[str]) -> list[dict[str, Any]]:
        return self._get("batch-aftermarket-quote", {"symbols": self._symbols(symbols)})

    def get_batch_aftermarket_trades(self, symbols: list[str]) -> list[dict[str, Any]]:
        return self._get("batch-aftermarket-trade", {"symbols": self._symbols(symbols)})

    def get_price_change(self, symbol: str) -> list[dict[str, Any]]:
        """Price change over standard windows (1D, 5D, 1M, YTD, ...)."""
        return self._get("stock-price-change", {"symbol": self._symbol(symbol)})

    def get_mutual_fund_quotes(self) -> list[dict[str, Any]]:
        return self._get("batch-mutualfund-quotes")

    def get_etf_quotes(self) -> list[dict[str, Any]]:
        return self._get("batch-etf-quotes")

    def get_commodities_quotes(self) -> list[dict[str, Any]]:
        return self._get("batch-commodity-quotes")

    def get_index_quotes(self) -> list[dict[str, Any]]:
        return self._get("batch-index-quotes")

    # -- Symbol directories --

    def get_symbols_list(self) -> list[dict[str, Any]]:
        """Every tradable symbol known to the API."""
        return self._get("stock-list")

    def get_exchange_symbols(self, exchange: str) -> list[dict[str, Any]]:
        return self._get("stock-list", {"exchange": exchange.upper()})

    def search_symbol(
        self, query: str, limit: int = 10, exchange: str | None = None
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"query": query, "limit": limit}
        params.update(self._compact(exchange=exchange))
        return self._get("search-symbol", params)

    def search_name(
        self, query: str, limit: int = 10, exchange: str | None = None
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"query": query, "limit": limit}
        params.update(self._compact(exchange=exchange))
        return self._get("search-name", params)

    def search(self, query: str, limit: int = 10, exchange: str | None = None) -> list[dict[str, Any]]:
        """Alias of ``search_symbol``; prefer ``search_symbol``/``search_name``."""
        return self.search_symbol(query, limit, exchange)

    def get_financial_statement_symbols(self) -> list[dict[str, Any]]:
        return self._get("financial-statement-symbol-list")

    def get_cik_list(self, page: int = 0, limit: int = 1000) -> list[dict[str, Any]]:
        return self._get("cik-list", {"page": page, "limit": limit})

    def get_symbol_changes(self) -> list[dict[str, Any]]:
        return self._get("symbol-change")

    def get_etf_symbols(self) -> list[dict[str, Any]]:
        return self._get("etf-list")

    def get_etf_list(self) -> list[dict[str, Any]]:
        return self._get("etf-list")

    def get_mutual_fund_list(self) -> list[dict[str, Any]]:
        return self._get("mutual-fund-list")

    def get_actively_trading(self) -> list[dict[str, Any]]:
        return self._get("actively-trading-list")

    def get_delisted_companies(self, page: int = 0, limit: int = 100) -> list[dict[str, Any]]:
        return self._get("delisted-companies", {"page": page, "limit": limit})

    def get_exchanges(self) -> list[dict[str, Any]]:
        return self._get("available-exchanges")

    def get_sectors(self) -> list[dict[str, Any]]:
        return self._get("available-sectors")

    def get_industries(self) -> list[dict[str, Any]]:
        return self._get("available-industries")

    def get_countries(self) -> list[str]:
        return self._get("available-countries")

    # -- Corporate data --

    def get_company_notes(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("company-notes", {"symbol": self._symbol(symbol)})

    def get_stock_peers(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("stock-peers", {"symbol": self._symbol(symbol)})

    def get_employee_count(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("employee-count", {"symbol": self._symbol(symbol)})

    def get_historical_employee_count(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("historical-employee-count", {"symbol": self._symbol(symbol)})

    def get_market_cap(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("market-capitalization", {"symbol": self._symbol(symbol)})

    def get_batch_market_cap(self, symbols: list[str]) -> list[dict[str, Any]]:
        return self._get("market-capitalization-batch", {"symbols": self._symbols(symbols)})

    def get_historical_market_cap(
        self, symbol: str, limit: int | None = None
    ) -> list[dict[str, Any]]:
        params = {"symbol": self._symbol(symbol), **self._compact(limit=limit)}
        return self._get("historical-market-capitalization", params)

    def get_shares_float(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("shares-float", {"symbol": self._symbol(symbol)})

    def get_all_shares_float(self, page: int = 0, limit: int = 1000) -> list[dict[str, Any]]:
        return self._get("shares-float-all", {"page": page, "limit": limit})

    def get_merger_acquisitions(self, page: int = 0, limit: int = 100) -> list[dict[str, Any]]:
        """Latest M&A transactions."""
        return self._get("mergers-acquisitions-latest", {"page": page, "limit": limit})

    def search_merger_acquisitions(self, name: str) -> list[dict[str, Any]]:
        return self._get("mergers-acquisitions-search", {"name": name})

    def get_executives(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("key-executives", {"symbol": self._symbol(symbol)})

    def get_executive_compensation(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("governance-executive-compensation", {"symbol": self._symbol(symbol)})

    def get_compensation_benchmark(self, year: int | None = None) -> list[dict[str, Any]]:
        """Industry compensation benchmark; ``year=None`` for the latest."""
        return self._get("executive-compensation-benchmark", self._compact(year=year))
