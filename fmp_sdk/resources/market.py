"""MarketResource: historical and intraday prices, forex, crypto and market hours."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import IntradayInterval
from fmp_sdk.resources.base import BaseResource
from fmp_sdk.validation import validate_date_range, validate_symbol


class MarketResource(BaseResource):
    """Price history and market-wide data."""

    def get_historical_prices(
        self,
        symbol: str,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> dict[str, Any]:
        """Daily OHLCV history, ``{"symbol": ..., "historical": [...]}``.

        Raises:
            FMPValidationError: Empty symbol or malformed/inverted dates.
        """
        validate_symbol(symbol)
        validate_date_range(from_date, to_date)
        return self._get(
            f"v3/historical-price-full/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_intraday_chart(
        self,
        symbol: str,
        interval: IntradayInterval | str = IntradayInterval.ONE_HOUR,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> list[dict[str, Any]]:
        """Intraday bars at ``interval``."""
        validate_symbol(symbol)
        validate_date_range(from_date, to_date)
        return self._get(
            f"v3/historical-chart/{interval}/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_light_chart(
        self,
        interval: IntradayInterval | str,
        symbol: str,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/historical-chart/{interval}/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_unadjusted_price(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> dict[str, Any]:
        return self._get(
            f"v3/historical-price-full/{self._symbol(symbol)}/line",
            self._date_range(from_date, to_date),
        )

    def get_dividend_adjusted_price(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> dict[str, Any]:
        params = {"serietype": "line", **self._date_range(from_date, to_date)}
        return self._get(f"v3/historical-price-full/{self._symbol(symbol)}", params)

    # -- Forex --

    def get_forex_price(self, pair: str | None = None) -> list[dict[str, Any]]:
        """Quote for one pair (e.g. ``"EURUSD"``), or every pair when omitted."""
        if pair:
            return self._get(f"v3/fx/{self._symbol(pair)}")
        return self._get("v3/fx")

    def get_all_forex_prices(self) -> list[dict[str, Any]]:
        return self._get("v3/fx")

    def get_forex_currency_pairs(self) -> list[dict[str, Any]]:
        return self._get("v3/symbol/available-forex-currency-pairs")

    def get_forex_quote_short(self, pair: str | None = None) -> list[dict[str, Any]]:
        if pair:
            return self._get(f"v3/forex/{self._symbol(pair)}")
        return self._get("v3/forex")

    def get_historical_forex(
        self, pair: str, from_date: str | None = None, to_date: str | None = None
    ) -> dict[str, Any]:
        return self._get(
            f"v3/historical-price-full/{self._symbol(pair)}",
            self._date_range(from_date, to_date),
        )

    def get_forex_light_chart(
        self, pair: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/historical-chart/line/{self._symbol(pair)}",
            self._date_range(from_date, to_date),
        )

    def get_forex_intraday_1min(
        self, pair: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._intraday("1min", pair, from_date, to_date)

    def get_forex_intraday_5min(
        self, pair: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._intraday("5min", pair, from_date, to_date)

    def get_forex_intraday_1hour(
        self, pair: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._intraday("1hour", pair, from_date, to_date)

    # -- Crypto --

    def get_crypto_price(self, symbol: str | None = None) -> list[dict[str, Any]]:
        """Quote for one coin (e.g. ``"BTCUSD"``), or every coin when omitted."""
        if symbol:
            return self._get(f"v3/quote/{self._symbol(symbol)}")
        return self._get("v3/quotes/crypto")

    def get_all_crypto_prices(self) -> list[dict[str, Any]]:
        return self._get("v3/quotes/crypto")

    def get_crypto_list(self) -> list[dict[str, Any]]:
        return self._get("v3/symbol/available-cryptocurrencies")

    def get_crypto_quote_short(self, symbol: str | None = None) -> list[dict[str, Any]]:
        return self.get_crypto_price(symbol)

    def get_crypto_light_chart(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/historical-chart/line/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_crypto_full_chart(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> dict[str, Any]:
        return self._get(
            f"v3/historical-price-full/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_crypto_intraday_1min(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._intraday("1min", symbol, from_date, to_date)

    def get_crypto_intraday_5min(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._intraday("5min", symbol, from_date, to_date)

    def get_crypto_intraday_1hour(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._intraday("1hour", symbol, from_date, to_date)

    # -- Market hours --

    def get_market_hours(self, exchange: str | None = None) -> dict[str, Any]:
        """Whether ``exchange`` (default: the US market) is open right now."""
        return self._get("v3/is-the-market-open", self._compact(exchange=exchange))

    def get_market_holidays(self, exchange: str | None = None) -> list[dict[str, Any]]:
        return self._get("v3/market-holidays", self._compact(exchange=exchange))

    def get_all_market_hours(self) -> list[dict[str, Any]]:
        return self._get("v3/market-hours")

    def _intraday(
        self, interval: str, symbol: str, from_date: str | None, to_date: str | None
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/historical-chart/{interval}/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )
