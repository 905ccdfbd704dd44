"""FMPClient: authenticated HTTP transport with an optional response cache."""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Callable, Mapping

import httpx

from fmp_sdk.cache.base import CacheProvider
from fmp_sdk.cache.keys import make_cache_key
from fmp_sdk.cache.memory import MemoryCache
from fmp_sdk.cache.ttl import TTLPolicy
from fmp_sdk.config import API_KEY_ENV, Settings, get_settings
from fmp_sdk.errors import FMPAPIError, FMPValidationError

logger = logging.getLogger(__name__)

KeyGenerator = Callable[[str, dict[str, Any]], str]


class RequestInterceptor:
    """Request/response hooks for debugging and monitoring.

    Subclass and override the hooks you need. URLs passed to the hooks never
    contain the API key.
    """

    def on_request(self, url: str) -> None:
        """Called before each attempt is sent."""

    def on_response(self, url: str, response: httpx.Response) -> None:
        """Called after a successful (2xx) response."""

    def on_error(self, url: str, error: FMPAPIError) -> None:
        """Called once when a request finally fails."""


class FMPClient:
    """Issues GET requests against the FMP API and returns decoded JSON.

    Caching is off unless ``cache`` is given (a CacheProvider, or True for a
    MemoryCache built from settings) or ``cache.enabled`` is set in config.
    Endpoints whose TTL resolves to 0 always go to the network.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        cache: CacheProvider | bool | None = None,
        ttl_policy: TTLPolicy | None = None,
        key_generator: KeyGenerator | None = None,
        interceptor: RequestInterceptor | None = None,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        settings = settings or get_settings()
        cfg = settings.client

        if api_key is None:
            api_key = cfg.api_key or os.environ.get(API_KEY_ENV)
        if not api_key or not api_key.strip():
            raise FMPValidationError("API key is required")
        self._api_key = api_key

        self.base_url = (base_url or cfg.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.timeout_seconds
        self.retries = retries if retries is not None else cfg.retries
        self._retry_statuses = frozenset(cfg.retry_status_codes)
        self._backoff_seconds = cfg.backoff_seconds
        self._sleep = sleep

        if cache is True or (cache is None and settings.cache.enabled):
            cache = MemoryCache(ttl_policy or TTLPolicy.from_settings(settings.cache))
        self._cache: CacheProvider | None = cache if isinstance(cache, CacheProvider) else None
        self.ttl_policy = (
            ttl_policy
            or getattr(self._cache, "ttl_policy", None)
            or TTLPolicy.from_settings(settings.cache)
        )
        self._key_generator = key_generator or make_cache_key
        self._interceptor = interceptor or RequestInterceptor()

        self._http = httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    # -- Public API --

    @property
    def cache(self) -> CacheProvider | None:
        """The cache in use, or None when caching is disabled."""
        return self._cache

    def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``endpoint`` and return the decoded JSON body.

        ``None``-valued params are not sent. Cache-first when a cache is
        configured and the endpoint TTL is positive.

        Raises:
            FMPAPIError: Non-2xx status, network failure, or undecodable body.
        """
        endpoint = endpoint.strip("/")
        query = {name: value for name, value in (params or {}).items() if value is not None}

        ttl = self._ttl_for(endpoint)
        key: str | None = None
        if ttl > 0:
            key = self._key_generator(endpoint, query)
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("Cache hit: %s", key)
                return cached
            logger.debug("Cache miss: %s", key)

        data = self._request(endpoint, query)

        if key is not None:
            self._cache.set(key, data, ttl)
        return data

    def clear_cache(self) -> None:
        """Drop every cached response."""
        if self._cache is not None:
            self._cache.clear()

    def invalidate_cache(self, endpoint: str, params: Mapping[str, Any] | None = None) -> bool:
        """Drop the cached response for one request. True if one existed."""
        if self._cache is None:
            return False
        query = {name: value for name, value in (params or {}).items() if value is not None}
        return self._cache.invalidate(self._key_generator(endpoint.strip("/"), query))

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> FMPClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        cache = type(self._cache).__name__ if self._cache is not None else None
        return f"FMPClient(base_url={self.base_url!r}, cache={cache})"

    # -- Internals --

    def _ttl_for(self, endpoint: str) -> float:
        if self._cache is None:
            return 0.0
        return self.ttl_policy.ttl_for(endpoint)

    def _request(self, endpoint: str, query: dict[str, Any]) -> Any:
        url = f"{self.base_url}/{endpoint}"
        wire_params = {**query, "apikey": self._api_key}

        attempt = 0
        while True:
            attempt += 1
            self._interceptor.on_request(url)
            logger.debug("GET %s params=%s (attempt %d)", url, query, attempt)
            try:
                response = self._http.get(url, params=wire_params)
            except httpx.TransportError as e:
                if attempt <= self.retries:
                    self._wait(attempt, url, type(e).__name__)
                    continue
                raise self._fail(url, FMPAPIError(str(e) or type(e).__name__)) from e
            except httpx.RequestError as e:
                # redirect loops, undecodable content: not worth retrying
                raise self._fail(url, FMPAPIError(str(e) or type(e).__name__)) from e

            if response.status_code in self._retry_statuses and attempt <= self.retries:
                self._wait(attempt, url, f"HTTP {response.status_code}", response)
                continue
            break

        status = response.status_code
        reason = response.reason_phrase
        if not response.is_success:
            message = response.text or f"HTTP {status}: {reason}"
            raise self._fail(url, FMPAPIError(message, status, reason))

        self._interceptor.on_response(url, response)
        try:
            return response.json()
        except ValueError as e:
            raise self._fail(
                url, FMPAPIError(f"Invalid JSON response from {endpoint}", status, reason)
            ) from e

    def _wait(
        self,
        attempt: int,
        url: str,
        cause: str,
        response: httpx.Response | None = None,
    ) -> None:
        delay = self._backoff_seconds * 2 ** (attempt - 1)
        retry_after = response.headers.get("Retry-After") if response is not None else None
        if retry_after and retry_after.isdigit():
            delay = max(delay, float(retry_after))
        logger.warning(
            "Retrying %s after %s (attempt %d/%d, sleeping %.2fs)",
            url, cause, attempt, self.retries, delay,
        )
        self._sleep(delay)

    def _fail(self, url: str, error: FMPAPIError) -> FMPAPIError:
        logger.debug("Request failed: %s: %s", url, error)
        self._interceptor.on_error(url, error)
        return error
