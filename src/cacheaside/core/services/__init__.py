"""Domain services for cacheaside."""

from cacheaside.core.services.cache_service import CacheService
from cacheaside.core.services.entry_store import CacheEntryStore
from cacheaside.core.services.invalidator import PrefixInvalidator
from cacheaside.core.services.read_through import (
    CacheLookup,
    Producer,
    ReadThroughInterceptor,
)

__all__ = [
    "CacheService",
    "CacheEntryStore",
    "CacheLookup",
    "Producer",
    "PrefixInvalidator",
    "ReadThroughInterceptor",
]
