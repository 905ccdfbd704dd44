"""TTL presets and the per-endpoint TTL policy."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from fmp_sdk.cache.keys import endpoint_category

if TYPE_CHECKING:
    from fmp_sdk.config import CacheSettings


class CacheTTL:
    """TTL presets in seconds."""

    NONE = 0.0  # real-time data, never cached
    SHORT = 60.0
    MEDIUM = 5 * 60.0
    LONG = 60 * 60.0
    DAY = 24 * 60 * 60.0


# Keyed by endpoint category (see keys.endpoint_category). A trailing "*"
# makes the key a prefix pattern: "quote*" matches "quote" and "quote-short".
DEFAULT_ENDPOINT_TTLS: Mapping[str, float] = MappingProxyType({
    # Real-time quotes
    "quote": CacheTTL.NONE,
    "quote-short": CacheTTL.NONE,
    "quotes": CacheTTL.NONE,
    "batch-quote": CacheTTL.NONE,
    "aftermarket-quote": CacheTTL.NONE,
    "aftermarket-trade": CacheTTL.NONE,
    "batch-aftermarket-quote": CacheTTL.NONE,
    "batch-aftermarket-trade": CacheTTL.NONE,
    "pre-post-market-quote": CacheTTL.NONE,
    "fx": CacheTTL.NONE,
    "forex": CacheTTL.NONE,
    "crypto": CacheTTL.NONE,
    "batch-forex-quotes": CacheTTL.NONE,
    "batch-crypto-quotes": CacheTTL.NONE,
    # Intraday
    "historical-chart": CacheTTL.NONE,
    # Live market data
    "stock-price-change": CacheTTL.SHORT,
    "sector-performance": CacheTTL.SHORT,
    "gainers": CacheTTL.SHORT,
    "losers": CacheTTL.SHORT,
    "most-active": CacheTTL.SHORT,
    "stock-market-gainers": CacheTTL.SHORT,
    "stock-market-losers": CacheTTL.SHORT,
    "stock-market-actives": CacheTTL.SHORT,
    # Semi-static
    "news": CacheTTL.LONG,
    "stock-news": CacheTTL.LONG,
    "general-news": CacheTTL.LONG,
    "press-releases": CacheTTL.LONG,
    "analyst-estimates": CacheTTL.LONG,
    "price-target": CacheTTL.LONG,
    "price-target-summary": CacheTTL.LONG,
    "analyst-recommendations": CacheTTL.LONG,
    "analyst-stock-recommendations": CacheTTL.LONG,
    "stock-grade": CacheTTL.LONG,
    "grades": CacheTTL.LONG,
    # Static / historical
    "profile": CacheTTL.DAY,
    "profile-cik": CacheTTL.DAY,
    "income-statement": CacheTTL.DAY,
    "balance-sheet-statement": CacheTTL.DAY,
    "cash-flow-statement": CacheTTL.DAY,
    "ratios": CacheTTL.DAY,
    "key-metrics": CacheTTL.DAY,
    "financial-scores": CacheTTL.DAY,
    "financial-growth": CacheTTL.DAY,
    "sec-filings": CacheTTL.DAY,
    "sec_filings": CacheTTL.DAY,
    "historical-price-eod": CacheTTL.DAY,
    "historical-price-full": CacheTTL.DAY,
    "historical-dividends": CacheTTL.DAY,
    "historical-stock-splits": CacheTTL.DAY,
    "etf-holdings": CacheTTL.DAY,
    "etf-holder": CacheTTL.DAY,
    "etf-info": CacheTTL.DAY,
    "stock-list": CacheTTL.DAY,
    "etf-list": CacheTTL.DAY,
    "cik-list": CacheTTL.DAY,
    "available-exchanges": CacheTTL.DAY,
    "available-sectors": CacheTTL.DAY,
    "available-industries": CacheTTL.DAY,
    "available-countries": CacheTTL.DAY,
    "key-executives": CacheTTL.DAY,
    "company-notes": CacheTTL.DAY,
    "stock-peers": CacheTTL.DAY,
    "employee-count": CacheTTL.DAY,
    "historical-employee-count": CacheTTL.DAY,
    "esg-ratings": CacheTTL.DAY,
    "esg-benchmark": CacheTTL.DAY,
    "dcf": CacheTTL.DAY,
    "levered-dcf": CacheTTL.DAY,
    "advanced-dcf": CacheTTL.DAY,
    "discounted-cash-flow": CacheTTL.DAY,
    "levered-discounted-cash-flow": CacheTTL.DAY,
    "sic-codes": CacheTTL.DAY,
    "standard_industrial_classification": CacheTTL.DAY,
    "cot-report": CacheTTL.DAY,
    "cot-analysis": CacheTTL.DAY,
})


class TTLPolicy:
    """Maps an endpoint to its TTL.

    Lookup order: exact category, then the longest matching ``prefix*``
    pattern, then ``default_ttl``. The table is fixed at construction.
    """

    def __init__(
        self,
        default_ttl: float = CacheTTL.MEDIUM,
        endpoint_ttls: Mapping[str, float] | None = None,
        use_default_ttls: bool = True,
    ) -> None:
        table: dict[str, float] = dict(DEFAULT_ENDPOINT_TTLS) if use_default_ttls else {}
        table.update({name: float(ttl) for name, ttl in (endpoint_ttls or {}).items()})

        self._default_ttl = float(default_ttl)
        self._table = MappingProxyType(table)
        self._exact = {name: ttl for name, ttl in table.items() if not name.endswith("*")}
        self._patterns = sorted(
            ((name[:-1], ttl) for name, ttl in table.items() if name.endswith("*")),
            key=lambda item: len(item[0]),
            reverse=True,
        )

    @classmethod
    def from_settings(cls, settings: CacheSettings) -> TTLPolicy:
        """Build from a ``CacheSettings`` section."""
        return cls(
            default_ttl=settings.default_ttl_seconds,
            endpoint_ttls=settings.endpoint_ttls,
            use_default_ttls=settings.use_default_ttls,
        )

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    @property
    def endpoint_ttls(self) -> Mapping[str, float]:
        """Read-only view of the full table (defaults merged with overrides)."""
        return self._table

    def ttl_for(self, endpoint: str) -> float:
        category = endpoint_category(endpoint)
        if category in self._exact:
            return self._exact[category]
        for prefix, ttl in self._patterns:
            if category.startswith(prefix):
                return ttl
        return self._default_ttl

    def __repr__(self) -> str:
        return f"TTLPolicy(default_ttl={self._default_ttl}, endpoints={len(self._table)})"
