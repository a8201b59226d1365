"""Key-value store interface."""

from typing import Protocol


class IKeyValueStore(Protocol):
    """Contract for the networked key-value store behind the cache.

    Methods are async so both in-process and remote stores fit.
    Patterns follow Redis glob syntax. Implementations raise
    StoreUnavailableError when the store cannot be reached.
    """

    async def get(self, key: str) -> bytes | None:
        """Retrieve the stored value.

        Args:
            key: The key to retrieve.

        Returns:
            The stored bytes, or None if absent or expired.
        """
        ...

    async def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        """Store a value that expires after ``ttl_seconds``.

        Args:
            key: The key to write. Any existing value is replaced.
            value: The bytes to store.
            ttl_seconds: Time-to-live in seconds.
        """
        ...

    async def scan(
        self,
        cursor: int,
        pattern: str,
        count: int,
    ) -> tuple[int, list[str]]:
        """Incrementally enumerate keys matching a pattern.

        Args:
            cursor: 0 to start, then the cursor returned by the previous call.
            pattern: Glob pattern to match keys.
            count: Hint for how many keys to return per call.

        Returns:
            The next cursor (0 when finished) and a batch of keys.
        """
        ...

    async def delete(self, *keys: str) -> int:
        """Delete keys.

        Returns:
            Number of keys that existed and were removed.
        """
        ...

    async def ttl(self, key: str) -> int:
        """Remaining time-to-live of a key.

        Returns:
            Seconds left, -1 if the key has no expiry, -2 if it is absent.
        """
        ...

    async def close(self) -> None:
        """Release connections held by the store."""
        ...
