"""Core domain layer for cacheaside."""

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

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "CachedItem",
    "CacheKey",
    # Errors
    "CacheError",
    "SerializationError",
    "StoreUnavailableError",
    # Interfaces
    "IKeyValueStore",
    "IKeyBuilder",
    "ISerializer",
    "IInvalidator",
    # Services
    "CacheService",
    "CacheEntryStore",
    "CacheLookup",
    "PrefixInvalidator",
    "ReadThroughInterceptor",
]
