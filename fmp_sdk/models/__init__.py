from fmp_sdk.models.params import (
    EconomicIndicator,
    IntradayInterval,
    Period,
    ScreenerParams,
    TechnicalTimeframe,
)

__all__ = [
    "EconomicIndicator",
    "IntradayInterval",
    "Period",
    "ScreenerParams",
    "TechnicalTimeframe",
]
