"""BaseResource: shared plumbing for the endpoint façades."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from fmp_sdk.client import FMPClient


class BaseResource:
    """One façade per API area. Shapes parameters, delegates to the client.

    Responses are returned exactly as decoded; errors from the client
    propagate unchanged.
    """

    def __init__(self, client: FMPClient) -> None:
        self._client = client

    def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return self._client.get(endpoint, params)

    @staticmethod
    def _symbol(symbol: str) -> str:
        return symbol.upper()

    @staticmethod
    def _symbols(symbols: Iterable[str]) -> str:
        return ",".join(s.upper() for s in symbols)

    @staticmethod
    def _compact(**params: Any) -> dict[str, Any]:
        """Keep only truthy optional parameters.

        Quirk kept on purpose: 0, False and "" are dropped exactly like None,
        so ``limit=0`` never reaches the query string.
        """
        return {name: value for name, value in params.items() if value}

    @classmethod
    def _date_range(cls, from_date: str | None, to_date: str | None) -> dict[str, Any]:
        return cls._compact(**{"from": from_date, "to": to_date})

    @staticmethod
    def _first(result: list[Any] | None) -> Any | None:
        """Unwrap single-object endpoints that answer with a one-item list."""
        return result[0] if result else None
