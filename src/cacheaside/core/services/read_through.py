"""Read-through interceptor wrapping response producers."""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from cacheaside.core.entities.cache_config import CacheConfig
from cacheaside.core.entities.cache_entry import CacheEntry
from cacheaside.core.exceptions import SerializationError, StoreUnavailableError
from cacheaside.core.services.entry_store import CacheEntryStore

logger = logging.getLogger(__name__)

Producer = Callable[[], Awaitable[Any]]

_MISS = object()


@dataclass(frozen=True)
class CacheLookup:
    """Outcome of a read-through call."""

    value: Any
    hit: bool


class ReadThroughInterceptor:
    """Serves responses from the entry store, producing them on a miss.

    Cache failures never reach the caller: an unreachable store or a
    corrupt entry is treated as a miss, and a failed write only means
    the response is not cached this time. Producer errors propagate
    unchanged and nothing is written.

    Concurrent misses on the same key are not coalesced. Every caller
    runs the producer and writes the key; the last write wins.
    """

    def __init__(
        self,
        entry_store: CacheEntryStore,
        config: CacheConfig | None = None,
    ) -> None:
        self._entry_store = entry_store
        self._config = config or CacheConfig()

    async def read_through(
        self,
        key: str,
        ttl_seconds: int | None,
        produce: Producer,
    ) -> Any:
        """Return the cached response for ``key``, producing it on a miss.

        Args:
            key: The cache key.
            ttl_seconds: TTL for a newly produced entry. Uses config
                default if None.
            produce: Async callable computing the response.

        Returns:
            The cached or freshly produced response.
        """
        lookup = await self.lookup(key, ttl_seconds, produce)
        return lookup.value

    async def lookup(
        self,
        key: str,
        ttl_seconds: int | None,
        produce: Producer,
    ) -> CacheLookup:
        """Same as read_through, but also reports whether it was a hit."""
        ttl = ttl_seconds if ttl_seconds is not None else self._config.default_ttl
        if ttl <= 0:
            raise ValueError("ttl_seconds must be greater than zero")

        if not self._config.enabled:
            return CacheLookup(value=await produce(), hit=False)

        started = time.perf_counter()

        cached = await self._read(key)
        if cached is not _MISS:
            logger.debug(
                "Cache hit for %s (%.1fms)", key, _elapsed_ms(started)
            )
            return CacheLookup(value=cached, hit=True)

        logger.debug("Cache miss for %s, invoking producer", key)
        result = await produce()

        entry = await self._write(key, result, ttl)
        if entry is not None:
            logger.debug(
                "Cached %s (%d bytes) until %s (%.1fms)",
                key,
                entry.size_bytes,
                entry.expires_at.isoformat(),
                _elapsed_ms(started),
            )

        return CacheLookup(value=result, hit=False)

    async def _read(self, key: str) -> Any:
        try:
            return await self._entry_store.get(key, default=_MISS)
        except StoreUnavailableError as e:
            logger.warning("Cache read failed for %s, serving from producer: %s", key, e)
        except SerializationError as e:
            logger.warning("Discarding unreadable cache entry %s: %s", key, e)
        return _MISS

    async def _write(self, key: str, value: Any, ttl: int) -> CacheEntry | None:
        try:
            return await self._entry_store.put(key, value, ttl)
        except (StoreUnavailableError, SerializationError) as e:
            logger.warning("Response for %s not cached: %s", key, e)
            return None


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000
