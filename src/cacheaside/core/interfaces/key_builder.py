"""Key builder interface."""

from typing import Protocol


class IKeyBuilder(Protocol):
    """Contract for building cache keys from request identity.

    Key builders must be pure: the same prefix and signature always give
    the same key, and requests that can produce different responses
    never share one.
    """

    def build(self, prefix: str, signature: str) -> str:
        """Build the cache key for a request.

        Args:
            prefix: Resource prefix, e.g. ``"products"``.
            signature: Request signature, usually path plus query string.

        Returns:
            The store key.
        """
        ...

    def pattern_for(self, prefix: str) -> str:
        """Build the glob pattern matching every key under ``prefix``.

        Args:
            prefix: Resource prefix to invalidate.

        Returns:
            A glob pattern understood by the key-value store.
        """
        ...
