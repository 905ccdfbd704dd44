"""ESGResource: environmental, social and governance scores."""

from __future__ import annotations

from typing import Any

from fmp_sdk.resources.base import BaseResource


class ESGResource(BaseResource):

    def get_esg_data(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("esg-disclosures", {"symbol": self._symbol(symbol)})

    def get_esg_ratings(self, symbol: str) -> list[dict[str, Any]]:
        return self._get("esg-ratings", {"symbol": self._symbol(symbol)})

    def get_esg_benchmark(self, year: int) -> list[dict[str, Any]]:
        """Sector ESG benchmarks for ``year``."""
        return self._get("esg-benchmark", {"year": year})
