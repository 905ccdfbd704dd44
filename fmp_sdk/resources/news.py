"""NewsResource: articles, news feeds, press releases and earnings call transcripts."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class NewsResource(BaseResource):

    def get_fmp_articles(self, page: int = 0, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("fmp-articles", {"page": page, "size": limit})

    def get_general_news(self, page: int = 0) -> list[dict[str, Any]]:
        return self._get("general-news", {"page": page})

    def get_stock_news(self, tickers: str | None = None, limit: int = 50) -> list[dict[str, Any]]:
        """Stock news, optionally filtered to comma-separated ``tickers``."""
        return self._get("stock-news", {"limit": limit, **self._compact(tickers=tickers)})

    def get_crypto_news(self, page: int = 0, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("crypto-news", {"page": page, "limit": limit})

    def get_forex_news(self, page: int = 0, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("forex-news", {"page": page, "limit": limit})

    def get_press_releases(self, symbol: str, page: int = 0) -> list[dict[str, Any]]:
        return self._get("press-releases", {"symbol": self._symbol(symbol), "page": page})

    def get_latest_press_releases(self, symbol: str, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("press-releases", {"symbol": self._symbol(symbol), "limit": limit})

    # -- Transcripts --

    def get_earnings_transcript(
        self, symbol: str, year: int, quarter: int
    ) -> list[dict[str, Any]]:
        return self._get(
            "earning-call-transcript",
            {"symbol": self._symbol(symbol), "year": year, "quarter": quarter},
        )

    def get_earnings_transcript_dates(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("earning-call-transcript-dates", {"symbol": self._symbol(symbol)})

    def get_batch_earnings_transcripts(self, symbol: str) -> list[dict[str, Any]]:
        """Every available transcript for ``symbol``."""
        return self._get("batch-earning-call-transcript", {"symbol": self._symbol(symbol)})

    def get_available_transcript_symbols(self) -> list[dict[str, Any]]:
        return self._get("earning-call-transcript-available-symbols")

    # -- Search --

    def search_press_releases(self, query: str, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("press-releases-search", {"query": query, "limit": limit})

    def search_stock_news(self, query: str, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("stock-news-search", {"query": query, "limit": limit})

    def search_crypto_news(self, query: str, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("crypto-news-search", {"query": query, "limit": limit})

    def search_forex_news(self, query: str, limit: int = 50) -> list[dict[str, Any]]:
        return self._get("forex-news-search", {"query": query, "limit": limit})
