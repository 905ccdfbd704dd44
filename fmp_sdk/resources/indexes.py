"""IndexesResource: index constituents, quotes and price history."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import IntradayInterval
from fmp_sdk.resources.base import BaseResource


class IndexesResource(BaseResource):
    """Market indexes. Index symbols carry a caret, e.g. ``^GSPC``."""

    # -- Constituents --

    def get_sp500_constituents(self) -> list[dict[str, Any]]:
        return self._get("sp500-constituent")

    def get_nasdaq_constituents(self) -> list[dict[str, Any]]:
        return self._get("nasdaq-constituent")

    def get_dow_jones_constituents(self) -> list[dict[str, Any]]:
        return self._get("dowjones-constituent")

    def get_historical_sp500(self) -> list[dict[str, Any]]:
        """Additions and removals over time."""
        return self._get("historical-sp500-constituent")

    def get_historical_nasdaq(self) -> list[dict[str, Any]]:
        return self._get("historical-nasdaq-constituent")

    def get_historical_dow_jones(self) -> list[dict[str, Any]]:
        return self._get("historical-dowjones-constituent")

    # -- Quotes & prices --

    def get_quote(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("quote", {"symbol": self._symbol(symbol)})

    def get_quote_short(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("quote-short", {"symbol": self._symbol(symbol)})

    def get_all_quotes(self) -> list[dict[str, Any]]:
        return self._get("batch-index-quotes")

    def get_list(self) -> list[dict[str, Any]]:
        return self._get("index-list")

    def get_historical_prices(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "historical-price-eod/full",
            {"symbol": self._symbol(symbol), **self._date_range(from_date, to_date)},
        )

    def get_historical_light(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "historical-price-eod/light",
            {"symbol": self._symbol(symbol), **self._date_range(from_date, to_date)},
        )

    def get_intraday_chart(
        self,
        symbol: str,
        interval: IntradayInterval | str = IntradayInterval.ONE_HOUR,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._get(
            f"historical-chart/{interval}",
            {"symbol": self._symbol(symbol), **self._date_range(from_date, to_date)},
        )
