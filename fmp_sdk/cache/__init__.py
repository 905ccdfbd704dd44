"""Response caching: request signatures, TTL policy, in-memory store."""

from fmp_sdk.cache.base import CacheProvider
from fmp_sdk.cache.keys import endpoint_category, endpoint_from_key, make_cache_key
from fmp_sdk.cache.memory import CacheEntry, MemoryCache
from fmp_sdk.cache.ttl import DEFAULT_ENDPOINT_TTLS, CacheTTL, TTLPolicy

__all__ = [
    "CacheEntry",
    "CacheProvider",
    "CacheTTL",
    "DEFAULT_ENDPOINT_TTLS",
    "MemoryCache",
    "TTLPolicy",
    "endpoint_category",
    "endpoint_from_key",
    "make_cache_key",
]
