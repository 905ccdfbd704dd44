"""CommoditiesResource: commodity futures quotes and charts."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import IntradayInterval
from fmp_sdk.resources.base import BaseResource


class CommoditiesResource(BaseResource):
    """Commodity symbols look like ``GCUSD`` (gold) or ``CLUSD`` (crude)."""

    def get_list(self) -> list[dict[str, Any]]:
        return self._get("v3/symbol/available-commodities")

    def get_quote(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/quote/{self._symbol(symbol)}")

    def get_quote_short(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/quote-short/{self._symbol(symbol)}")

    def get_all_quotes(self) -> list[dict[str, Any]]:
        return self._get("v3/quotes/commodity")

    def get_historical_prices(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> dict[str, Any]:
        return self._get(
            f"v3/historical-price-full/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_light_chart(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/historical-chart/line/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_intraday_chart(
        self,
        symbol: str,
        interval: IntradayInterval | str = IntradayInterval.ONE_HOUR,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/historical-chart/{interval}/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )
