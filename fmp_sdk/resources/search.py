"""SearchResource: symbol/name/identifier lookup and the stock screener."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import ScreenerParams
from fmp_sdk.resources.base import BaseResource

# Screener filters sent whenever set, including 0 and False.
_EXPLICIT_FILTERS = (
    "market_cap_more_than",
    "market_cap_lower_than",
    "price_more_than",
    "price_lower_than",
    "beta_more_than",
    "beta_lower_than",
    "volume_more_than",
    "volume_lower_than",
    "dividend_more_than",
    "dividend_lower_than",
    "is_etf",
    "is_actively_trading",
)


class SearchResource(BaseResource):

    def search_by_symbol(
        self, query: str, limit: int = 10, exchange: str | None = None
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"query": query.upper(), "limit": limit}
        if exchange:
            params["exchange"] = exchange.upper()
        return self._get("search-symbol", params)

    def search_by_name(
        self, query: str, limit: int = 10, exchange: str | None = None
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"query": query, "limit": limit}
        if exchange:
            params["exchange"] = exchange.upper()
        return self._get("search-name", params)

    def search_by_cik(self, cik: str) -> list[dict[str, Any]]:
        return self._get("search-cik", {"cik": cik})

    def search_by_cusip(self, cusip: str) -> list[dict[str, Any]]:
        return self._get("search-cusip", {"cusip": cusip})

    def search_by_isin(self, isin: str) -> list[dict[str, Any]]:
        return self._get("search-isin", {"isin": isin})

    def screen_stocks(
        self, params: ScreenerParams | dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Run the stock screener.

        ``params`` may be a ScreenerParams or a dict using either field names
        or wire aliases. Numeric and boolean filters are sent whenever they
        are set (``beta_more_than=0`` included); category filters only when
        non-empty. ``exchange`` is upper-cased.
        """
        if params is None:
            params = ScreenerParams()
        elif isinstance(params, dict):
            params = ScreenerParams.model_validate(params)

        fields = ScreenerParams.model_fields
        query: dict[str, Any] = {}
        for name in _EXPLICIT_FILTERS:
            value = getattr(params, name)
            if value is not None:
                query[fields[name].alias] = value
        query.update(self._compact(
            sector=params.sector, industry=params.industry, country=params.country
        ))
        if params.exchange:
            query["exchange"] = params.exchange.upper()
        if params.limit is not None:
            query["limit"] = params.limit
        return self._get("company-screener", query)

    def get_exchange_symbols(self, exchange: str) -> list[dict[str, Any]]:
        return self._get("exchange-symbols", {"exchange": exchange.upper()})
