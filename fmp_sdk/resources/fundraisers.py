"""FundraisersResource: crowdfunding and equity offerings (Form C / Form D)."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class FundraisersResource(BaseResource):

    # -- Crowdfunding --

    def get_latest_crowdfunding(self, page: int = 0) -> list[dict[str, Any]]:
        return self._get("crowdfunding-offerings-latest", {"page": page})

    def search_crowdfunding(
        self, name: str | None = None, cik: str | None = None, page: int = 0
    ) -> list[dict[str, Any]]:
        return self._get(
            "crowdfunding-offerings-search", {"page": page, **self._compact(name=name, cik=cik)}
        )

    def get_crowdfunding_by_cik(self, cik: str, page: int = 0) -> list[dict[str, Any]]:
        return self._get("crowdfunding-offerings", {"cik": cik, "page": page})

    # -- Equity offerings --

    def get_latest_equity(self, page: int = 0) -> list[dict[str, Any]]:
        return self._get("fundraising-latest", {"page": page})

    def search_equity(
        self, name: str | None = None, cik: str | None = None, page: int = 0
    ) -> list[dict[str, Any]]:
        return self._get("fundraising-search", {"page": page, **self._compact(name=name, cik=cik)})

    def get_equity_by_cik(self, cik: str, page: int = 0) -> list[dict[str, Any]]:
        return self._get("fundraising", {"cik": cik, "page": page})
