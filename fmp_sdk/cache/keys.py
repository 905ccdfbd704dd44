"""Request signatures: deterministic cache keys and endpoint categories."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

# Leading path segments that only select an API version.
_VERSION_SEGMENTS = frozenset({"api", "stable", "v3", "v4"})


def _render(value: Any) -> str:
    """Render a query value the way it goes over the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def make_cache_key(endpoint: str, params: Mapping[str, Any] | None = None) -> str:
    """Build the cache key for ``endpoint`` + ``params``.

    Parameters are sorted by name, so insertion order never changes the key.
    ``None`` values are skipped (they are never sent).

    >>> make_cache_key("income-statement", {"symbol": "AAPL", "period": "annual"})
    'income-statement?period=annual&symbol=AAPL'
    """
    endpoint = endpoint.strip("/")
    items = sorted(
        (name, _render(value))
        for name, value in (params or {}).items()
        if value is not None
    )
    if not items:
        return endpoint
    return f"{endpoint}?{urlencode(items)}"


def endpoint_from_key(key: str) -> str:
    """Recover the endpoint path from a key built by ``make_cache_key``."""
    return key.split("?", 1)[0]


def endpoint_category(endpoint: str) -> str:
    """First meaningful path segment: ``v3/income-statement/AAPL`` -> ``income-statement``."""
    segments = [s for s in endpoint.strip("/").split("/") if s]
    if not segments:
        return ""
    if len(segments) > 1 and segments[0] in _VERSION_SEGMENTS:
        segments = segments[1:]
    return segments[0]
