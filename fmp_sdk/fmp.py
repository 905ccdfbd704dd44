"""FMP: the entry point wiring one client into every resource façade."""

from __future__ import annotations

from typing import Any

from fmp_sdk.cache.base import CacheProvider
from fmp_sdk.client import FMPClient
from fmp_sdk.config import Settings
from fmp_sdk.resources import (
    AnalystResource,
    BulkResource,
    COTResource,
    CommoditiesResource,
    CompanyResource,
    EconomicsResource,
    ESGResource,
    ETFResource,
    EventsResource,
    FinancialsResource,
    FundraisersResource,
    IndexesResource,
    InsiderResource,
    MarketResource,
    NewsResource,
    PerformanceResource,
    SearchResource,
    SECResource,
    TechnicalResource,
    ValuationResource,
)


class FMP:
    """Financial Modeling Prep API.

    Usage::

        fmp = FMP(api_key="...", cache=True)
        profile = fmp.company.get_profile("AAPL")
        bars = fmp.market.get_historical_prices("AAPL", "2024-01-01", "2024-06-30")

    The API key falls back to ``client.api_key`` in config, then the
    ``FMP_API_KEY`` environment variable. Every façade shares one client, so
    there is exactly one cache per FMP instance. Extra keyword arguments
    (``base_url``, ``timeout``, ``retries``, ``ttl_policy``, ``key_generator``,
    ``interceptor``, ``transport``, ...) are passed to FMPClient.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        cache: CacheProvider | bool | None = None,
        settings: Settings | None = None,
        **client_options: Any,
    ) -> None:
        self.client = FMPClient(api_key, cache=cache, settings=settings, **client_options)

        self.company = CompanyResource(self.client)
        self.market = MarketResource(self.client)
        self.financials = FinancialsResource(self.client)
        self.analyst = AnalystResource(self.client)
        self.events = EventsResource(self.client)
        self.insider = InsiderResource(self.client)
        self.news = NewsResource(self.client)
        self.sec = SECResource(self.client)
        self.technical = TechnicalResource(self.client)
        self.performance = PerformanceResource(self.client)
        self.etf = ETFResource(self.client)
        self.indexes = IndexesResource(self.client)
        self.commodities = CommoditiesResource(self.client)
        self.economics = EconomicsResource(self.client)
        self.valuation = ValuationResource(self.client)
        self.esg = ESGResource(self.client)
        self.cot = COTResource(self.client)
        self.fundraisers = FundraisersResource(self.client)
        self.search = SearchResource(self.client)
        self.bulk = BulkResource(self.client)

    @property
    def cache(self) -> CacheProvider | None:
        return self.client.cache

    def clear_cache(self) -> None:
        self.client.clear_cache()

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> FMP:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FMP({self.client!r})"
