"""Tests for FMPClient: auth, caching, retries, error mapping."""

import logging
from unittest.mock import MagicMock

import httpx
import pytest

from fmp_sdk.cache.memory import MemoryCache
from fmp_sdk.cache.ttl import TTLPolicy
from fmp_sdk.client import FMPClient, RequestInterceptor
from fmp_sdk.config import API_KEY_ENV, CacheSettings, Settings
from fmp_sdk.errors import FMPAPIError, FMPError, FMPValidationError


class TestApiKey:
    def test_missing_key_raises(self) -> None:
        with pytest.raises(FMPValidationError, match="API key is required"):
            FMPClient()

    def test_blank_key_raises(self) -> None:
        with pytest.raises(FMPValidationError):
            FMPClient("   ")

    def test_key_from_environment(self, monkeypatch: pytest.MonkeyPatch, wire) -> None:
        monkeypatch.setenv(API_KEY_ENV, "env-key")
        client = FMPClient(transport=wire.transport)
        client.get("profile", {"symbol": "AAPL"})
        assert wire.last.url.params["apikey"] == "env-key"

    def test_key_from_settings(self, wire) -> None:
        settings = Settings()
        settings.client.api_key = "cfg-key"
        client = FMPClient(settings=settings, transport=wire.transport)
        client.get("profile")
        assert wire.last.url.params["apikey"] == "cfg-key"

    def test_key_sent_as_query_param(self, client: FMPClient, wire) -> None:
        client.get("profile", {"symbol": "AAPL"})
        assert wire.last.url.params["apikey"] == "test-key"


class TestRequests:
    def test_url_and_params(self, client: FMPClient, wire) -> None:
        client.get("v3/income-statement/AAPL", {"period": "annual", "limit": 5})
        assert wire.last.method == "GET"
        assert wire.last.url.host == "financialmodelingprep.com"
        assert wire.path == "v3/income-statement/AAPL"
        assert wire.params == {"period": "annual", "limit": "5"}

    def test_none_params_omitted(self, client: FMPClient, wire) -> None:
        client.get("grades", {"symbol": "MSFT", "limit": None})
        assert wire.params == {"symbol": "MSFT"}

    def test_zero_params_sent(self, client: FMPClient, wire) -> None:
        client.get("general-news", {"page": 0})
        assert wire.params == {"page": "0"}

    def test_booleans_lowercase_on_wire(self, client: FMPClient, wire) -> None:
        client.get("company-screener", {"isEtf": False})
        assert wire.params == {"isEtf": "false"}

    def test_returns_decoded_json(self, client: FMPClient, wire) -> None:
        wire.reply_json([{"symbol": "AAPL", "price": 190.5}])
        assert client.get("quote", {"symbol": "AAPL"}) == [{"symbol": "AAPL", "price": 190.5}]

    def test_custom_base_url(self, wire) -> None:
        client = FMPClient("k", base_url="https://example.test/api/", transport=wire.transport)
        client.get("/profile")
        assert str(wire.last.url).startswith("https://example.test/api/profile?")

    def test_accepts_json(self, client: FMPClient, wire) -> None:
        client.get("profile")
        assert wire.last.headers["accept"] == "application/json"


class TestCaching:
    def test_disabled_by_default(self, client: FMPClient, wire) -> None:
        assert client.cache is None
        client.get("profile", {"symbol": "AAPL"})
        client.get("profile", {"symbol": "AAPL"})
        assert len(wire.requests) == 2

    def test_cache_true_builds_memory_cache(self, wire) -> None:
        client = FMPClient("k", cache=True, transport=wire.transport)
        assert isinstance(client.cache, MemoryCache)

    def test_enabled_via_settings(self, wire) -> None:
        settings = Settings(cache=CacheSettings(enabled=True))
        client = FMPClient("k", settings=settings, transport=wire.transport)
        assert isinstance(client.cache, MemoryCache)

    def test_cache_false_overrides_settings(self, wire) -> None:
        settings = Settings(cache=CacheSettings(enabled=True))
        client = FMPClient("k", cache=False, settings=settings, transport=wire.transport)
        assert client.cache is None

    def test_hit_skips_network(self, cached_client: FMPClient, wire) -> None:
        wire.reply_json([{"symbol": "AAPL"}])
        first = cached_client.get("profile", {"symbol": "AAPL"})
        second = cached_client.get("profile", {"symbol": "AAPL"})
        assert first == second == [{"symbol": "AAPL"}]
        assert len(wire.requests) == 1

    def test_param_order_shares_entry(self, cached_client: FMPClient, wire) -> None:
        cached_client.get("v3/income-statement/AAPL", {"period": "annual", "limit": 5})
        cached_client.get("v3/income-statement/AAPL", {"limit": 5, "period": "annual"})
        assert len(wire.requests) == 1

    def test_different_params_miss(self, cached_client: FMPClient, wire) -> None:
        cached_client.get("profile", {"symbol": "AAPL"})
        cached_client.get("profile", {"symbol": "MSFT"})
        assert len(wire.requests) == 2

    def test_api_key_not_in_cache_key(self, cached_client: FMPClient, memory_cache: MemoryCache) -> None:
        cached_client.get("profile", {"symbol": "AAPL"})
        assert memory_cache.has("profile?symbol=AAPL")

    def test_realtime_endpoint_not_cached(self, cached_client: FMPClient, memory_cache, wire) -> None:
        cached_client.get("quote", {"symbol": "AAPL"})
        cached_client.get("quote", {"symbol": "AAPL"})
        assert len(wire.requests) == 2
        assert len(memory_cache) == 0

    def test_expiry_refetches(self, cached_client: FMPClient, clock, wire) -> None:
        cached_client.get("stock-market-gainers")
        clock.advance(59)
        cached_client.get("stock-market-gainers")
        assert len(wire.requests) == 1
        clock.advance(1)
        cached_client.get("stock-market-gainers")
        assert len(wire.requests) == 2

    def test_errors_not_cached(self, cached_client: FMPClient, wire) -> None:
        wire.queue(httpx.Response(404, text="not found"))
        with pytest.raises(FMPAPIError):
            cached_client.get("profile", {"symbol": "NOPE"})
        cached_client.get("profile", {"symbol": "NOPE"})
        assert len(wire.requests) == 2

    def test_custom_key_generator(self, wire, memory_cache: MemoryCache) -> None:
        keygen = MagicMock(return_value="fixed")
        client = FMPClient(
            "k", cache=memory_cache, key_generator=keygen, transport=wire.transport
        )
        client.get("profile", {"symbol": "AAPL"})
        client.get("profile", {"symbol": "MSFT"})
        keygen.assert_called_with("profile", {"symbol": "MSFT"})
        assert memory_cache.has("fixed")
        assert len(wire.requests) == 1

    def test_custom_ttl_policy(self, wire, clock) -> None:
        cache = MemoryCache(clock=clock)
        client = FMPClient(
            "k", cache=cache, ttl_policy=TTLPolicy(endpoint_ttls={"quote": 30}),
            transport=wire.transport,
        )
        client.get("quote", {"symbol": "AAPL"})
        client.get("quote", {"symbol": "AAPL"})
        assert len(wire.requests) == 1

    def test_invalidate_cache(self, cached_client: FMPClient, wire) -> None:
        cached_client.get("profile", {"symbol": "AAPL"})
        assert cached_client.invalidate_cache("profile", {"symbol": "AAPL"}) is True
        assert cached_client.invalidate_cache("profile", {"symbol": "AAPL"}) is False
        cached_client.get("profile", {"symbol": "AAPL"})
        assert len(wire.requests) == 2

    def test_clear_cache(self, cached_client: FMPClient, wire) -> None:
        cached_client.get("profile", {"symbol": "AAPL"})
        cached_client.get("profile", {"symbol": "MSFT"})
        cached_client.clear_cache()
        cached_client.get("profile", {"symbol": "AAPL"})
        assert len(wire.requests) == 3

    def test_cache_management_without_cache(self, client: FMPClient) -> None:
        client.clear_cache()
        assert client.invalidate_cache("profile") is False


class TestRetries:
    def test_retries_then_succeeds(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.Response(503), httpx.Response(502), httpx.Response(200, json={"ok": 1}))
        assert client.get("profile") == {"ok": 1}
        assert len(wire.requests) == 3
        assert wire.sleeps == pytest.approx([0.3, 0.6])

    def test_gives_up_after_retries(self, client: FMPClient, wire) -> None:
        wire.queue(*[httpx.Response(500) for _ in range(4)])
        with pytest.raises(FMPAPIError) as exc_info:
            client.get("profile")
        assert exc_info.value.status == 500
        assert len(wire.requests) == 4
        assert wire.sleeps == pytest.approx([0.3, 0.6, 1.2])

    def test_retry_after_header_respected(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.Response(429, headers={"Retry-After": "2"}), httpx.Response(200, json=[]))
        client.get("profile")
        assert wire.sleeps == [2.0]

    def test_client_errors_not_retried(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.Response(401, text='{"Error Message": "Invalid API KEY."}'))
        with pytest.raises(FMPAPIError):
            client.get("profile")
        assert len(wire.requests) == 1
        assert wire.sleeps == []

    def test_zero_retries(self, wire) -> None:
        client = FMPClient("k", retries=0, transport=wire.transport, sleep=wire.sleeps.append)
        wire.queue(httpx.Response(503))
        with pytest.raises(FMPAPIError):
            client.get("profile")
        assert len(wire.requests) == 1

    def test_network_error_retried(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.ConnectError("connection refused"), httpx.Response(200, json=[1]))
        assert client.get("profile") == [1]
        assert len(wire.requests) == 2

    def test_network_error_exhausted(self, client: FMPClient, wire) -> None:
        wire.queue(*[httpx.ConnectError("connection refused") for _ in range(4)])
        with pytest.raises(FMPAPIError, match="connection refused") as exc_info:
            client.get("profile")
        assert exc_info.value.status is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestLogging:
    def test_retry_logged_as_warning(self, client: FMPClient, wire, caplog) -> None:
        wire.queue(httpx.Response(503), httpx.Response(200, json=[]))
        with caplog.at_level(logging.WARNING, logger="fmp_sdk.client"):
            client.get("profile")
        assert any("Retrying" in r.getMessage() and "HTTP 503" in r.getMessage() for r in caplog.records)

    def test_cache_hits_logged_at_debug(self, cached_client: FMPClient, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="fmp_sdk.client"):
            cached_client.get("profile", {"symbol": "AAPL"})
            cached_client.get("profile", {"symbol": "AAPL"})
        messages = [r.getMessage() for r in caplog.records]
        assert "Cache miss: profile?symbol=AAPL" in messages
        assert "Cache hit: profile?symbol=AAPL" in messages

    def test_api_key_never_logged(self, client: FMPClient, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="fmp_sdk.client"):
            client.get("profile", {"symbol": "AAPL"})
        assert all("test-key" not in r.getMessage() for r in caplog.records)


class TestErrorMapping:
    def test_body_text_becomes_message(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.Response(403, text="Exclusive Endpoint"))
        with pytest.raises(FMPAPIError) as exc_info:
            client.get("v4/profile/all")
        err = exc_info.value
        assert str(err) == "Exclusive Endpoint"
        assert err.status == 403
        assert err.status_text == "Forbidden"

    def test_empty_body_uses_status_line(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.Response(404))
        with pytest.raises(FMPAPIError, match="HTTP 404: Not Found"):
            client.get("profile")

    def test_invalid_json(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(FMPAPIError, match="Invalid JSON response from profile") as exc_info:
            client.get("profile")
        assert exc_info.value.status == 200

    def test_api_error_is_fmp_error(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.Response(400))
        with pytest.raises(FMPError):
            client.get("profile")

    def test_redirect_loop_mapped_without_retry(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.TooManyRedirects("Exceeded maximum allowed redirects."))
        with pytest.raises(FMPAPIError, match="maximum allowed redirects") as exc_info:
            client.get("profile")
        assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)
        assert len(wire.requests) == 1
        assert wire.sleeps == []

    def test_decoding_error_mapped(self, client: FMPClient, wire) -> None:
        wire.queue(httpx.DecodingError("bad gzip stream"))
        with pytest.raises(FMPAPIError, match="bad gzip stream"):
            client.get("profile")


class TestInterceptor:
    def test_hooks_called(self, wire) -> None:
        interceptor = MagicMock(spec=RequestInterceptor)
        client = FMPClient("k", interceptor=interceptor, transport=wire.transport)
        client.get("profile", {"symbol": "AAPL"})
        url = "https://financialmodelingprep.com/api/profile"
        interceptor.on_request.assert_called_once_with(url)
        interceptor.on_response.assert_called_once()
        assert interceptor.on_response.call_args.args[0] == url
        interceptor.on_error.assert_not_called()

    def test_on_error_called_once(self, wire) -> None:
        interceptor = MagicMock(spec=RequestInterceptor)
        client = FMPClient(
            "k", interceptor=interceptor, transport=wire.transport, sleep=wire.sleeps.append
        )
        wire.queue(httpx.Response(503), httpx.Response(404))
        with pytest.raises(FMPAPIError):
            client.get("profile")
        assert interceptor.on_request.call_count == 2
        interceptor.on_error.assert_called_once()
        assert interceptor.on_error.call_args.args[1].status == 404

    def test_hook_urls_never_contain_key(self, wire) -> None:
        seen: list[str] = []

        class Recorder(RequestInterceptor):
            def on_request(self, url: str) -> None:
                seen.append(url)

        FMPClient("secret", interceptor=Recorder(), transport=wire.transport).get("profile")
        assert seen and all("secret" not in u for u in seen)

    def test_default_interceptor_is_noop(self) -> None:
        interceptor = RequestInterceptor()
        interceptor.on_request("u")
        interceptor.on_response("u", httpx.Response(200))
        interceptor.on_error("u", FMPAPIError("x"))


class TestLifecycle:
    def test_context_manager_closes(self, wire) -> None:
        with FMPClient("k", transport=wire.transport) as client:
            client.get("profile")
        assert client._http.is_closed

    def test_repr_hides_key(self, wire) -> None:
        client = FMPClient("secret", cache=True, transport=wire.transport)
        text = repr(client)
        assert "secret" not in text
        assert "MemoryCache" in text

    def test_empty_cache_still_shown(self, wire) -> None:
        client = FMPClient("k", cache=MemoryCache(), transport=wire.transport)
        assert len(client.cache) == 0
        assert repr(client).endswith("cache=MemoryCache)")

    def test_uncached_repr(self, client: FMPClient) -> None:
        assert repr(client).endswith("cache=None)")
