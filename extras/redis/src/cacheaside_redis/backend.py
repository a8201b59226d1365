"""Redis key-value store implementation."""

import asyncio
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional, Union

import redis.asyncio as redis
from redis.exceptions import RedisError

from cacheaside.core.exceptions import StoreUnavailableError


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Translate Redis, socket and decoding failures into StoreUnavailableError."""
    try:
        yield
    except (RedisError, OSError, asyncio.TimeoutError, UnicodeDecodeError) as e:
        raise StoreUnavailableError(operation, str(e) or type(e).__name__) from e


def _as_bytes(value: Union[bytes, str]) -> bytes:
    return value.encode() if isinstance(value, str) else value


def _as_str(value: Union[bytes, str]) -> str:
    return value.decode() if isinstance(value, bytes) else value


class RedisKeyValueStore:
    """Redis key-value store for distributed deployments.

    Wraps an injected ``redis.asyncio.Redis`` client. The store owns the
    client's lifecycle: build it at startup with ``from_url`` (or pass a
    configured client) and ``close()`` it at shutdown, or use the store
    as an async context manager.
    """

    def __init__(self, client: redis.Redis) -> None:
        """Initialize the Redis store.

        Args:
            client: The Redis client to issue commands with.
        """
        self._redis = client

    @classmethod
    def from_url(
        cls,
        redis_url: str = "redis://localhost:6379",
        socket_timeout: Optional[float] = 0.5,
        **kwargs: object,
    ) -> "RedisKeyValueStore":
        """Create a store with a new connection pool.

        Args:
            redis_url: Redis connection URL.
            socket_timeout: Per-command and connect timeout in seconds.
            **kwargs: Extra options for ``redis.asyncio.from_url``.

        Returns:
            A new RedisKeyValueStore.
        """
        client = redis.from_url(  # type: ignore[no-untyped-call]
            redis_url,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            **kwargs,
        )
        return cls(client)

    @property
    def client(self) -> redis.Redis:
        return self._redis

    async def get(self, key: str) -> Optional[bytes]:
        """Retrieve stored value by key.

        Args:
            key: The key to retrieve.

        Returns:
            The stored value as bytes, or None if not found or expired.
        """
        with _store_errors("get"):
            value = await self._redis.get(key)
        return _as_bytes(value) if value is not None else None

    async def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        """Store value with SETEX, replacing any previous value and TTL.

        Args:
            key: The key.
            value: The value to store as bytes.
            ttl_seconds: Time-to-live in seconds.
        """
        with _store_errors("set"):
            await self._redis.setex(key, ttl_seconds, value)

    async def scan(
        self,
        cursor: int,
        pattern: str,
        count: int,
    ) -> tuple[int, list[str]]:
        """Run one SCAN step.

        Uses SCAN instead of KEYS for production safety.

        Args:
            cursor: Cursor from the previous step, 0 to start.
            pattern: Redis glob pattern.
            count: COUNT hint for the step.

        Returns:
            The next cursor (0 when finished) and the keys found.
        """
        with _store_errors("scan"):
            next_cursor, keys = await self._redis.scan(cursor, match=pattern, count=count)
        return int(next_cursor), [_as_str(key) for key in keys]

    async def delete(self, *keys: str) -> int:
        """Delete keys.

        Returns:
            Number of keys that existed and were deleted.
        """
        if not keys:
            return 0
        with _store_errors("delete"):
            return int(await self._redis.delete(*keys))

    async def ttl(self, key: str) -> int:
        """Remaining TTL: seconds left, -1 for no expiry, -2 if absent."""
        with _store_errors("ttl"):
            return int(await self._redis.ttl(key))

    async def ping(self) -> bool:
        """Check that Redis answers.

        Returns:
            True if Redis responded, False otherwise.
        """
        try:
            with _store_errors("ping"):
                return bool(await self._redis.ping())
        except StoreUnavailableError:
            return False

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisKeyValueStore":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
