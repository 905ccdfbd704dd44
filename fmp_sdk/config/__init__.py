"""Central configuration: packaged YAML defaults, user overrides, environment."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


# --- Settings models ---


class ClientSettings(BaseModel):
    base_url: str = "https://financialmodelingprep.com/api"
    api_key: str | None = None  # None = read FMP_API_KEY
    timeout_seconds: float = 30.0
    retries: int = 3
    retry_status_codes: list[int] = Field(
        default_factory=lambda: [408, 413, 429, 500, 502, 503, 504]
    )
    backoff_seconds: float = 0.3


class CacheSettings(BaseModel):
    enabled: bool = False
    default_ttl_seconds: float = 300.0
    use_default_ttls: bool = True
    endpoint_ttls: dict[str, float] = Field(default_factory=dict)


class DisplaySettings(BaseModel):
    max_rows: int = 25


class Settings(BaseModel):
    """Top-level settings container."""

    client: ClientSettings = Field(default_factory=ClientSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


# --- Loading ---

_DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"
_USER_CONFIG_PATH = Path.home() / ".fmp_sdk" / "config.yaml"
API_KEY_ENV = "FMP_API_KEY"

_cached_settings: Settings | None = None


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base. Returns new dict."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(
    user_config_path: Path | None = None,
    _force_reload: bool = False,
) -> Settings:
    """Load defaults.yaml, merge ~/.fmp_sdk/config.yaml if present.

    ``FMP_API_KEY`` in the environment wins over any configured key.

    Args:
        user_config_path: Override path for user config file.
        _force_reload: Bypass cache (for testing).

    Returns:
        Merged Settings instance.
    """
    global _cached_settings
    if _cached_settings is not None and not _force_reload:
        return _cached_settings

    # Layer 1: package defaults
    with open(_DEFAULTS_PATH) as f:
        defaults = yaml.safe_load(f) or {}

    # Layer 2: user overrides
    user_path = user_config_path or _USER_CONFIG_PATH
    if user_path.exists():
        with open(user_path) as f:
            user = yaml.safe_load(f) or {}
        merged = _deep_merge(defaults, user)
    else:
        merged = defaults

    # Layer 3: environment
    env_key = os.environ.get(API_KEY_ENV)
    if env_key:
        merged = _deep_merge(merged, {"client": {"api_key": env_key}})

    _cached_settings = Settings(**merged)
    return _cached_settings


def get_settings() -> Settings:
    """Get cached settings (singleton). Loads on first call."""
    return load_settings()


def reset_settings() -> None:
    """Clear cached settings. Next get_settings() will reload from YAML."""
    global _cached_settings
    _cached_settings = None
