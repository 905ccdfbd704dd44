"""MemoryCache: in-process response cache with lazy TTL expiry."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable

from pydantic import BaseModel

from fmp_sdk.cache.base import CacheProvider
from fmp_sdk.cache.keys import endpoint_from_key
from fmp_sdk.cache.ttl import TTLPolicy

logger = logging.getLogger(__name__)


class CacheEntry(BaseModel):
    key: str
    value: Any
    stored_at: float  # clock seconds
    ttl: float  # seconds

    def is_expired(self, now: float) -> bool:
        return now - self.stored_at >= self.ttl


class MemoryCache(CacheProvider):
    """Dict-backed cache keyed by request signature.

    Entries expire lazily: an expired entry is reported absent by ``get`` but
    stays in memory until it is overwritten, invalidated, cleared or swept
    with ``prune()``. There is no capacity bound; meant for one short-lived
    process (a CLI run, a single request handler), not a daemon.
    """

    def __init__(
        self,
        ttl_policy: TTLPolicy | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_policy = ttl_policy or TTLPolicy()
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Return the cached value if present and unexpired, else None.

        Read-only: a miss or an expired hit does not evict anything.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry.is_expired(self._clock()):
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store or overwrite ``key``. ``ttl=None`` uses the endpoint policy."""
        if ttl is None:
            ttl = self.ttl_policy.ttl_for(endpoint_from_key(key))
        with self._lock:
            self._entries[key] = CacheEntry(
                key=key, value=value, stored_at=self._clock(), ttl=float(ttl),
            )

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def has(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not entry.is_expired(self._clock())

    def prune(self) -> int:
        """Remove expired entries. Never called implicitly. Returns count removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("Pruned %d expired cache entries", len(expired))
        return len(expired)

    def stats(self) -> dict[str, int]:
        """Entry counts, expired entries included until pruned."""
        with self._lock:
            now = self._clock()
            expired = sum(1 for e in self._entries.values() if e.is_expired(now))
            return {"size": len(self._entries), "expired": expired}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
