"""TechnicalResource: server-side technical indicators."""

from __future__ import annotations

from typing import Any

from fmp_sdk.models.params import TechnicalTimeframe
from fmp_sdk.resources.base import BaseResource


class TechnicalResource(BaseResource):
    """Indicator series computed by the API.

    Every method hits ``v3/technical_indicator/{timeframe}/{SYMBOL}`` with the
    indicator ``type`` and lookback ``period``. Moving averages and standard
    deviation default to 10 bars; RSI, ADX and Williams %R to 14.
    """

    def _indicator(
        self, kind: str, symbol: str, period: int, timeframe: TechnicalTimeframe | str
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/technical_indicator/{timeframe}/{self._symbol(symbol)}",
            {"type": kind, "period": period},
        )

    def get_sma(
        self, symbol: str, period: int = 10, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("sma", symbol, period, timeframe)

    def get_ema(
        self, symbol: str, period: int = 10, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("ema", symbol, period, timeframe)

    def get_wma(
        self, symbol: str, period: int = 10, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("wma", symbol, period, timeframe)

    def get_dema(
        self, symbol: str, period: int = 10, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("dema", symbol, period, timeframe)

    def get_tema(
        self, symbol: str, period: int = 10, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("tema", symbol, period, timeframe)

    def get_standard_deviation(
        self, symbol: str, period: int = 10, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("standardDeviation", symbol, period, timeframe)

    def get_rsi(
        self, symbol: str, period: int = 14, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("rsi", symbol, period, timeframe)

    def get_adx(
        self, symbol: str, period: int = 14, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("adx", symbol, period, timeframe)

    def get_williams(
        self, symbol: str, period: int = 14, timeframe: TechnicalTimeframe | str = TechnicalTimeframe.DAILY
    ) -> list[dict[str, Any]]:
        return self._indicator("williams", symbol, period, timeframe)
