"""Typed wrapper over the key-value store."""

import asyncio
from collections.abc import Awaitable
from typing import Any, TypeVar

from cacheaside.core.entities.cache_config import CacheConfig
from cacheaside.core.entities.cache_entry import CachedItem, CacheEntry
from cacheaside.core.exceptions import SerializationError, StoreUnavailableError
from cacheaside.core.interfaces.cache_backend import IKeyValueStore
from cacheaside.core.interfaces.serializer import ISerializer

T = TypeVar("T")

# Sentinels returned by IKeyValueStore.ttl()
TTL_NO_EXPIRY = -1
TTL_MISSING = -2


class CacheEntryStore:
    """Stores and retrieves serialized responses by key.

    Owns the payload encoding and bounds every store round-trip by
    ``config.store_timeout``. It never retries; a failed or timed out
    operation raises StoreUnavailableError and the caller decides.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        serializer: ISerializer,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the entry store.

        Args:
            store: The key-value store holding the entries.
            serializer: Serializer used to encode and decode payloads.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._store = store
        self._serializer = serializer
        self._config = config or CacheConfig()

    async def get(self, key: str, default: Any = None) -> Any:
        """Get the cached response for ``key``.

        Args:
            key: The cache key.
            default: Returned on a miss. Pass a sentinel to tell a
                missing entry apart from a cached ``None``.

        Returns:
            The deserialized response, or ``default`` if absent or expired.

        Raises:
            StoreUnavailableError: If the store cannot be reached.
            SerializationError: If the stored payload is corrupt.
        """
        payload = await self._call("get", self._store.get(key))
        if payload is None:
            return default
        return self._serializer.deserialize(payload)

    async def put(self, key: str, value: Any, ttl_seconds: int) -> CacheEntry:
        """Write a response, replacing any existing entry for ``key``.

        Args:
            key: The cache key.
            value: The response to cache.
            ttl_seconds: Time-to-live in seconds, must be positive.

        Returns:
            The written CacheEntry.

        Raises:
            ValueError: If ``ttl_seconds`` is not positive.
            SerializationError: If the value cannot be serialized.
            StoreUnavailableError: If the store cannot be reached.
        """
        entry = CacheEntry.create(
            key=key,
            payload=self._serializer.serialize(value),
            ttl_seconds=ttl_seconds,
        )
        await self._call(
            "set", self._store.set(entry.key, entry.payload, entry.ttl_seconds)
        )
        return entry

    async def delete_matching(self, pattern: str) -> int:
        """Delete every key matching ``pattern``.

        Walks the key space with incremental scans and deletes batch by
        batch, so the full key set is never held in memory.

        Args:
            pattern: Glob pattern to match keys.

        Returns:
            Number of keys deleted.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = await self._call(
                "scan", self._store.scan(cursor, pattern, self._config.scan_count)
            )

            if keys:
                count += await self._call("delete", self._store.delete(*keys))

            if cursor == 0:
                break

        return count

    async def list_all(self, pattern: str = "*") -> dict[str, CachedItem]:
        """Describe every stored key matching ``pattern``.

        Intended for diagnostics only: it costs a round-trip per key.

        Args:
            pattern: Glob pattern to match keys.

        Returns:
            Mapping of key to its value, remaining TTL and size.
        """
        items: dict[str, CachedItem] = {}
        cursor = 0

        while True:
            cursor, keys = await self._call(
                "scan", self._store.scan(cursor, pattern, self._config.scan_count)
            )

            for key in keys:
                item = await self._describe(key)
                if item is not None:
                    items[key] = item

            if cursor == 0:
                break

        return items

    async def _describe(self, key: str) -> CachedItem | None:
        payload = await self._call("get", self._store.get(key))
        if payload is None:
            # Expired or deleted since the scan
            return None

        remaining = await self._call("ttl", self._store.ttl(key))
        if remaining == TTL_MISSING:
            return None

        try:
            value = self._serializer.deserialize(payload)
        except SerializationError:
            value = None

        return CachedItem(
            value=value,
            ttl=None if remaining == TTL_NO_EXPIRY else remaining,
            size_bytes=len(payload),
        )

    async def _call(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._config.store_timeout)
        except asyncio.TimeoutError as e:
            raise StoreUnavailableError(operation, "timed out") from e
