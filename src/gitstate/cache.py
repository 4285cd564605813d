"""Single-slot cache with time-to-live expiry.

Each cached service owns exactly one TTLCache. The slot remembers which
repository it was filled for, so a service reused for another repository
sees a miss instead of the previous repository's data.

Expiry is checked lazily on read; nothing runs in the background. The cache
is not safe for concurrent use on its own: the owning service serializes
get/set/invalidate.
"""

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from gitstate.integrations.time.abc import Time

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value and the monotonic instant it stops being valid."""

    key: str
    value: T
    expires_at: float


class TTLCache(Generic[T]):
    """Holds at most one value, valid for `ttl` seconds after it was set."""

    def __init__(self, ttl: float, time: Time, name: str = "cache") -> None:
        """Create TTLCache.

        Args:
            ttl: Seconds a value stays valid; fixed for the cache's lifetime
            time: Clock used to stamp and check expiry
            name: Label used in log messages
        """
        if ttl <= 0:
            raise ValueError(f"TTL must be positive, got {ttl}")
        self._ttl = ttl
        self._time = time
        self._name = name
        self._entry: CacheEntry[T] | None = None

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: str) -> T | None:
        """Return the cached value for key, or None on a miss.

        A value read at or after its expiry instant is a miss. The stale
        entry stays in the slot until the next set() or invalidate().
        """
        entry = self._entry
        if entry is None:
            logger.debug("%s miss (empty)", self._name)
            return None
        if entry.key != key:
            logger.debug("%s miss (filled for %s, asked for %s)", self._name, entry.key, key)
            return None
        if self._time.monotonic() >= entry.expires_at:
            logger.debug("%s miss (expired)", self._name)
            return None
        logger.debug("%s hit", self._name)
        return entry.value

    def is_valid(self, key: str) -> bool:
        """True if get(key) would return a value."""
        entry = self._entry
        return entry is not None and entry.key == key and self._time.monotonic() < entry.expires_at

    def set(self, key: str, value: T) -> None:
        """Store value for key, replacing whatever the slot held."""
        expires_at = self._time.monotonic() + self._ttl
        self._entry = CacheEntry(key=key, value=value, expires_at=expires_at)

    def invalidate(self) -> None:
        """Clear the slot so the next get() is a miss regardless of time left."""
        if self._entry is not None:
            logger.debug("%s invalidated", self._name)
        self._entry = None
