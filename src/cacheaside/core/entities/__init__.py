"""Domain entities for cacheaside."""

from cacheaside.core.entities.cache_config import CacheConfig
from cacheaside.core.entities.cache_entry import CachedItem, CacheEntry
from cacheaside.core.entities.cache_key import CacheKey, escape_glob

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "CachedItem",
    "CacheKey",
    "escape_glob",
]
