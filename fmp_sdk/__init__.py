"""Typed client for the Financial Modeling Prep market data API."""

# Config
from fmp_sdk.config import Settings, get_settings

# Entry point & transport
from fmp_sdk.fmp import FMP
from fmp_sdk.client import FMPClient, RequestInterceptor

# Caching
from fmp_sdk.cache import CacheProvider, CacheTTL, MemoryCache, TTLPolicy, make_cache_key

# Errors
from fmp_sdk.errors import FMPAPIError, FMPError, FMPValidationError

# Models
from fmp_sdk.models import (
    EconomicIndicator,
    IntradayInterval,
    Period,
    ScreenerParams,
    TechnicalTimeframe,
)

# Frames
from fmp_sdk.frames import to_frame

__version__ = "0.1.0"

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Entry point
    "FMP",
    "FMPClient",
    "RequestInterceptor",
    # Caching
    "CacheProvider",
    "CacheTTL",
    "MemoryCache",
    "TTLPolicy",
    "make_cache_key",
    # Errors
    "FMPError",
    "FMPAPIError",
    "FMPValidationError",
    # Models
    "EconomicIndicator",
    "IntradayInterval",
    "Period",
    "ScreenerParams",
    "TechnicalTimeframe",
    # Frames
    "to_frame",
]
