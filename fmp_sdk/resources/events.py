"""EventsResource: earnings, dividends, splits, IPOs and economic calendars."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class EventsResource(BaseResource):
    """Corporate and economic event calendars. Dates are ``YYYY-MM-DD``."""

    def get_earnings(self, symbol: str, limit: int | None = None) -> list[dict[str, Any]]:
        """Historical and upcoming earnings for one symbol."""
        return self._get(
            f"v3/historical/earning_calendar/{self._symbol(symbol)}", self._compact(limit=limit)
        )

    def get_earnings_calendar(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get("v3/earning_calendar", self._date_range(from_date, to_date))

    def get_earnings_confirmed(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get("v4/earning-calendar-confirmed", self._date_range(from_date, to_date))

    def get_dividends(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> dict[str, Any]:
        return self._get(
            f"v3/historical-price-full/stock_dividend/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_dividends_calendar(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get("v3/stock_dividend_calendar", self._date_range(from_date, to_date))

    def get_stock_splits(
        self, symbol: str, from_date: str | None = None, to_date: str | None = None
    ) -> dict[str, Any]:
        return self._get(
            f"v3/historical-price-full/stock_split/{self._symbol(symbol)}",
            self._date_range(from_date, to_date),
        )

    def get_stock_splits_calendar(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get("v3/stock_split_calendar", self._date_range(from_date, to_date))

    def get_ipo_calendar(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get("v3/ipo_calendar", self._date_range(from_date, to_date))

    def get_ipo_prospectus(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get("v4/ipo-calendar-prospectus", self._date_range(from_date, to_date))

    def get_ipo_confirmed(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        return self._get("v4/ipo-calendar-confirmed", self._date_range(from_date, to_date))

    def get_economic_calendar(
        self, from_date: str | None = None, to_date: str | None = None
    ) -> list[dict[str, Any]]:
        """Macro releases (CPI, payrolls, rate decisions, ...) in the window."""
        return self._get("v3/economic_calendar", self._date_range(from_date, to_date))
