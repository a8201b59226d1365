"""cacheaside - Read-through response caching for async Python services.

A Python library that serves previously computed responses from a
key-value store, populates the store on cache misses, and clears
stale entries by resource prefix when the underlying data changes.
Cache failures never fail a request: reads fall back to the producer
and writes are skipped.

Example:
    from cacheaside import (
        CacheConfig,
        CacheService,
        DefaultKeyBuilder,
        JsonSerializer,
    )
    from cacheaside_redis import RedisKeyValueStore

    store = RedisKeyValueStore.from_url("redis://localhost:6379")
    cache_service = CacheService(
        store=store,
        key_builder=DefaultKeyBuilder(),
        serializer=JsonSerializer(),
        config=CacheConfig(default_ttl=300),
    )

    products = await cache_service.read_through(
        "products",
        "/api/products",
        db.list_products,
        ttl=600,
    )

    # After a write
    await db.create_product(data)
    await cache_service.invalidate("products")

    # At shutdown
    await cache_service.close()
"""

from cacheaside.core.entities import CacheConfig, CachedItem, CacheEntry, CacheKey
from cacheaside.core.exceptions import (
    CacheError,
    SerializationError,
    StoreUnavailableError,
)
from cacheaside.core.interfaces import (
    IInvalidator,
    IKeyBuilder,
    IKeyValueStore,
    ISerializer,
)
from cacheaside.core.services import (
    CacheEntryStore,
    CacheLookup,
    CacheService,
    PrefixInvalidator,
    ReadThroughInterceptor,
)
from cacheaside.decorators import cached, invalidates
from cacheaside.infrastructure import (
    DefaultKeyBuilder,
    InMemoryKeyValueStore,
    JsonSerializer,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "CachedItem",
    "CacheKey",
    # Errors
    "CacheError",
    "SerializationError",
    "StoreUnavailableError",
    # Core interfaces
    "IKeyValueStore",
    "IKeyBuilder",
    "ISerializer",
    "IInvalidator",
    # Core services
    "CacheService",
    "CacheEntryStore",
    "CacheLookup",
    "PrefixInvalidator",
    "ReadThroughInterceptor",
    # Infrastructure implementations
    "InMemoryKeyValueStore",
    "DefaultKeyBuilder",
    "JsonSerializer",
    # Decorators
    "cached",
    "invalidates",
]
