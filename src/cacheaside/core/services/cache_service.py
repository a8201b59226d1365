"""Cache service - main orchestrator for caching operations."""

from collections.abc import Iterable
from typing import Any

from cacheaside.core.entities.cache_config import CacheConfig
from cacheaside.core.entities.cache_entry import CachedItem
from cacheaside.core.interfaces.cache_backend import IKeyValueStore
from cacheaside.core.interfaces.key_builder import IKeyBuilder
from cacheaside.core.interfaces.serializer import ISerializer
from cacheaside.core.services.entry_store import CacheEntryStore
from cacheaside.core.services.invalidator import PrefixInvalidator
from cacheaside.core.services.read_through import (
    CacheLookup,
    Producer,
    ReadThroughInterceptor,
)


class CacheService:
    """Domain service that orchestrates caching operations.

    This is the main entry point for cache operations, composing the
    entry store, read-through interceptor and invalidator over one
    key-value store. The store is injected and its lifecycle belongs to
    whoever builds the service: open it at startup, call ``close()``
    at shutdown.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the cache service.

        Args:
            store: The key-value store holding cached responses.
            key_builder: The key builder for generating cache keys.
            serializer: The serializer for encoding/decoding responses.
            config: Optional cache configuration. Uses defaults if not provided.

        Raises:
            ValueError: If ``config.namespace`` is set and the key builder
                does not build keys in that namespace.
        """
        self._store = store
        self._key_builder = key_builder
        self._config = config or CacheConfig()

        builder_namespace = getattr(key_builder, "namespace", None)
        if self._config.namespace and builder_namespace != self._config.namespace:
            raise ValueError(
                f"Key builder namespace {builder_namespace!r} does not match "
                f"configured namespace {self._config.namespace!r}"
            )

        self._entry_store = CacheEntryStore(store, serializer, self._config)
        self._interceptor = ReadThroughInterceptor(self._entry_store, self._config)
        self._invalidator = PrefixInvalidator(
            self._entry_store, key_builder, self._config
        )

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def key_builder(self) -> IKeyBuilder:
        return self._key_builder

    @property
    def entry_store(self) -> CacheEntryStore:
        return self._entry_store

    @property
    def interceptor(self) -> ReadThroughInterceptor:
        return self._interceptor

    @property
    def invalidator(self) -> PrefixInvalidator:
        return self._invalidator

    def build_key(self, prefix: str, signature: str) -> str:
        """Build the cache key for a request."""
        return self._key_builder.build(prefix, signature)

    async def read_through(
        self,
        prefix: str,
        signature: str,
        produce: Producer,
        ttl: int | None = None,
    ) -> Any:
        """Return the cached response for a request, producing it on a miss.

        Args:
            prefix: Resource prefix, e.g. ``"products"``.
            signature: Request signature, usually path plus query string.
            produce: Async callable computing the response.
            ttl: TTL in seconds. Uses config default if not provided.

        Returns:
            The cached or freshly produced response.
        """
        lookup = await self.lookup(prefix, signature, produce, ttl=ttl)
        return lookup.value

    async def lookup(
        self,
        prefix: str,
        signature: str,
        produce: Producer,
        ttl: int | None = None,
    ) -> CacheLookup:
        """Same as read_through, but also reports whether it was a hit."""
        key = self.build_key(prefix, signature)
        return await self._interceptor.lookup(key, ttl, produce)

    async def invalidate(self, prefix: str) -> int:
        """Invalidate cached entries under a resource prefix.

        Returns:
            Number of entries invalidated.
        """
        return await self._invalidator.invalidate(prefix)

    async def invalidate_many(self, prefixes: Iterable[str]) -> int:
        """Invalidate cached entries under several resource prefixes."""
        return await self._invalidator.invalidate_many(prefixes)

    async def list_all(self) -> dict[str, CachedItem]:
        """Describe every cached entry owned by this service.

        Raises:
            StoreUnavailableError: If the store cannot be reached.
        """
        return await self._entry_store.list_all(self._key_builder.pattern_for(""))

    async def clear(self) -> int:
        """Delete every cached entry owned by this service.

        Raises:
            StoreUnavailableError: If the store cannot be reached.
        """
        return await self._entry_store.delete_matching(
            self._key_builder.pattern_for("")
        )

    async def close(self) -> None:
        """Close the underlying key-value store."""
        await self._store.close()

    async def __aenter__(self) -> "CacheService":
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        await self.close()
