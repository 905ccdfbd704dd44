"""CacheProvider abstract base class."""

from abc import ABC, abstractmethod
from typing import Any


class CacheProvider(ABC):
    """Base class for response caches plugged into FMPClient.

    Implement this to back the SDK with another store. A lookup that finds
    nothing, or finds an expired entry, returns None. No operation raises.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the fresh value for ``key`` or None."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds (None = policy TTL)."""
        ...

    @abstractmethod
    def invalidate(self, key: str) -> bool:
        """Drop ``key``. Returns True if an entry existed."""
        ...

    @abstractmethod
    def clear(self) -> None: ...

    def has(self, key: str) -> bool:
        return self.get(key) is not None
