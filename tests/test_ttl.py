"""Tests for TTLPolicy."""

import pytest

from fmp_sdk.cache.ttl import DEFAULT_ENDPOINT_TTLS, CacheTTL, TTLPolicy
from fmp_sdk.config import CacheSettings


class TestPresets:
    def test_values_in_seconds(self) -> None:
        assert CacheTTL.NONE == 0
        assert CacheTTL.SHORT == 60
        assert CacheTTL.MEDIUM == 300
        assert CacheTTL.LONG == 3600
        assert CacheTTL.DAY == 86400

    def test_default_table_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_ENDPOINT_TTLS["profile"] = 1  # type: ignore[index]


class TestTTLFor:
    @pytest.fixture
    def policy(self) -> TTLPolicy:
        return TTLPolicy()

    @pytest.mark.parametrize(
        "endpoint,ttl",
        [
            ("quote", CacheTTL.NONE),
            ("v3/quote/BTCUSD", CacheTTL.NONE),
            ("v3/fx/EURUSD", CacheTTL.NONE),
            ("v3/historical-chart/1hour/AAPL", CacheTTL.NONE),
            ("stock-market-gainers", CacheTTL.SHORT),
            ("stock-news", CacheTTL.LONG),
            ("grades", CacheTTL.LONG),
            ("profile", CacheTTL.DAY),
            ("v3/income-statement/AAPL", CacheTTL.DAY),
            ("v3/historical-price-full/AAPL", CacheTTL.DAY),
            ("v3/sec_filings/AAPL", CacheTTL.DAY),
        ],
    )
    def test_builtin_categories(self, policy: TTLPolicy, endpoint: str, ttl: float) -> None:
        assert policy.ttl_for(endpoint) == ttl

    def test_unknown_endpoint_gets_default(self, policy: TTLPolicy) -> None:
        assert policy.ttl_for("v4/commitment_of_traders_report") == CacheTTL.MEDIUM

    def test_custom_default(self) -> None:
        assert TTLPolicy(default_ttl=42).ttl_for("something-else") == 42

    def test_override_beats_builtin(self) -> None:
        policy = TTLPolicy(endpoint_ttls={"quote": 15})
        assert policy.ttl_for("quote") == 15
        assert policy.ttl_for("profile") == CacheTTL.DAY

    def test_without_builtin_table(self) -> None:
        policy = TTLPolicy(default_ttl=10, use_default_ttls=False)
        assert policy.ttl_for("quote") == 10
        assert len(policy.endpoint_ttls) == 0

    def test_prefix_pattern(self) -> None:
        policy = TTLPolicy(endpoint_ttls={"historical-*": 7, "historical-sector-*": 3})
        assert policy.ttl_for("historical-industry-pe") == 7
        # longest prefix wins
        assert policy.ttl_for("historical-sector-pe") == 3

    def test_exact_beats_pattern(self) -> None:
        policy = TTLPolicy(endpoint_ttls={"historical-*": 7})
        assert policy.ttl_for("v3/historical-price-full/AAPL") == CacheTTL.DAY

    def test_from_settings(self) -> None:
        settings = CacheSettings(
            default_ttl_seconds=99, use_default_ttls=False, endpoint_ttls={"profile": 5}
        )
        policy = TTLPolicy.from_settings(settings)
        assert policy.default_ttl == 99
        assert policy.ttl_for("profile") == 5
        assert policy.ttl_for("quote") == 99
