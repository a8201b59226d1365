"""Redis key-value store for cacheaside."""

from cacheaside_redis.backend import RedisKeyValueStore

__all__ = ["RedisKeyValueStore"]
