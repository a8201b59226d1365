"""In-memory key-value store implementation."""

import time
from collections.abc import Callable
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]

from cacheaside.utils.patterns import glob_match


class _StoredValue(NamedTuple):
    data: bytes
    expires: float


def _time_to_use(key: str, value: _StoredValue, now: float) -> float:
    return value.expires


class InMemoryKeyValueStore:
    """In-memory key-value store using LRU with per-key TTL.

    Suitable for single-process deployments and tests. Uses cachetools
    TLRUCache, so each key keeps the TTL it was written with and the
    least recently used keys are evicted once ``maxsize`` is reached.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory store.

        Args:
            maxsize: Maximum number of keys held.
            timer: Clock returning seconds, injectable for tests.
        """
        self._maxsize = maxsize
        self._cache: TLRUCache[str, _StoredValue] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    async def get(self, key: str) -> bytes | None:
        item = self._cache.get(key)
        return item.data if item is not None else None

    async def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be greater than zero")
        self._cache[key] = _StoredValue(value, self._cache.timer() + ttl_seconds)

    async def scan(
        self,
        cursor: int,
        pattern: str,
        count: int,
    ) -> tuple[int, list[str]]:
        """Return every matching key in a single batch.

        The keys already live in process memory, so there is nothing
        to gain from paging; the returned cursor is always 0.
        """
        self._cache.expire()
        keys = [key for key in list(self._cache.keys()) if glob_match(pattern, key)]
        return 0, keys

    async def delete(self, *keys: str) -> int:
        count = 0
        for key in keys:
            if self._cache.pop(key, None) is not None:
                count += 1
        return count

    async def ttl(self, key: str) -> int:
        item = self._cache.get(key)
        if item is None:
            return -2
        return max(0, round(item.expires - self._cache.timer()))

    async def close(self) -> None:
        """Nothing to release for an in-process store."""

    def clear(self) -> None:
        """Drop every key."""
        self._cache.clear()

    def __len__(self) -> int:
        """Return the number of live keys."""
        self._cache.expire()
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum number of keys."""
        return self._maxsize
