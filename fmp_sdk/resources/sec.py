"""SECResource: EDGAR filings, RSS feeds, CIK lookup and SIC codes."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class SECResource(BaseResource):
    """SEC filings. ``form_type`` values are EDGAR form names like ``10-K``."""

    def get_filings(
        self, symbol: str, form_type: str | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            f"v3/sec_filings/{self._symbol(symbol)}", self._compact(type=form_type, limit=limit)
        )

    def get_filings_by_cik(
        self, cik: str, form_type: str | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(f"v3/sec_filings/{cik}", self._compact(type=form_type, limit=limit))

    def get_filings_by_name(
        self, name: str, form_type: str | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self._get(
            "v3/sec_filings", {"name": name, **self._compact(type=form_type, limit=limit)}
        )

    def get_rss_feed(
        self,
        form_type: str | None = None,
        from_date: str | None = None,
        to_date: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Real-time filings feed across all companies."""
        params = self._compact(type=form_type, limit=limit)
        params.update(self._date_range(from_date, to_date))
        return self._get("v4/rss_feed", params)

    def search_by_form_type(
        self,
        form_type: str,
        from_date: str | None = None,
        to_date: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"type": form_type}
        params.update(self._date_range(from_date, to_date))
        params.update(self._compact(limit=limit))
        return self._get("v4/rss_feed", params)

    def get_8k_filings(
        self, from_date: str | None = None, to_date: str | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]:
        return self.search_by_form_type("8-K", from_date, to_date, limit)

    def get_latest_filings(self, limit: int | None = None) -> list[dict[str, Any]]:
        return self._get("v4/rss_feed_8k", self._compact(limit=limit))

    def search_company_by_symbol(self, symbol: str) -> list[dict[str, Any]]:
        return self._get(f"v3/cik-search/{self._symbol(symbol)}")

    def search_company_by_cik(self, cik: str) -> list[dict[str, Any]]:
        return self._get(f"v3/cik/{cik}")

    def get_all_sic_codes(self) -> list[dict[str, Any]]:
        return self._get("v4/standard_industrial_classification/all")

    def get_sic_by_code(self, sic_code: str) -> list[dict[str, Any]]:
        return self._get("v4/standard_industrial_classification", {"sicCode": sic_code})

    def search_sic(self, industry: str) -> list[dict[str, Any]]:
        return self._get("v4/standard_industrial_classification", {"industry": industry})

    def get_full_profile(self, symbol: str) -> dict[str, Any]:
        """Company outlook: profile, metrics, insiders, filings and more in one payload."""
        return self._get("v4/company-outlook", {"symbol": self._symbol(symbol)})
