"""Shared test fixtures for fmp_sdk tests."""

from pathlib import Path

import httpx
import pytest

import fmp_sdk.config as config_module
from fmp_sdk.cache.memory import MemoryCache
from fmp_sdk.client import FMPClient
from fmp_sdk.config import API_KEY_ENV, reset_settings
from fmp_sdk.fmp import FMP


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class WireRecorder:
    """Records outgoing requests and replays queued responses.

    Queue httpx.Response objects (or exceptions to raise). With an empty
    queue every request gets ``200 []``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response | Exception] = []
        self.sleeps: list[float] = []

    def queue(self, *responses: httpx.Response | Exception) -> None:
        self.responses.extend(responses)

    def reply_json(self, payload: object, status: int = 200) -> None:
        self.queue(httpx.Response(status, json=payload))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return httpx.Response(200, json=[])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def path(self) -> str:
        """Path of the last request relative to the API root."""
        return self.last.url.path.removeprefix("/api/")

    @property
    def params(self) -> dict[str, str]:
        """Query params of the last request, API key excluded."""
        params = dict(self.last.url.params)
        params.pop("apikey", None)
        return params


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Each test sees package defaults only: no user config, no env key."""
    monkeypatch.setattr(config_module, "_USER_CONFIG_PATH", tmp_path / "missing.yaml")
    monkeypatch.delenv(API_KEY_ENV, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def wire() -> WireRecorder:
    return WireRecorder()


@pytest.fixture
def client(wire: WireRecorder) -> FMPClient:
    """Uncached client talking to the recorder."""
    return FMPClient("test-key", transport=wire.transport, sleep=wire.sleeps.append)


@pytest.fixture
def memory_cache(clock: FakeClock) -> MemoryCache:
    return MemoryCache(clock=clock)


@pytest.fixture
def cached_client(wire: WireRecorder, memory_cache: MemoryCache) -> FMPClient:
    return FMPClient(
        "test-key", cache=memory_cache, transport=wire.transport, sleep=wire.sleeps.append
    )


@pytest.fixture
def fmp(wire: WireRecorder) -> FMP:
    return FMP("test-key", transport=wire.transport, sleep=wire.sleeps.append)
