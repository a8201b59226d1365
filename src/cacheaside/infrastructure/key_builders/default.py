"""Default key builder implementation."""

from cacheaside.core.entities.cache_key import KEY_SEPARATOR, CacheKey
from cacheaside.utils.hashing import hash_value, normalize_signature


class DefaultKeyBuilder:
    """Default key builder using the normalized request signature.

    Creates deterministic, human-readable cache keys of the form
    ``[namespace:]prefix:path?sorted-query``.
    """

    def __init__(
        self,
        namespace: str | None = None,
        hash_signatures: bool = False,
    ) -> None:
        """Initialize the key builder.

        Args:
            namespace: Optional prefix for all cache keys.
            hash_signatures: Replace the signature by its SHA-256 digest,
                keeping keys short for very long URLs.

        Raises:
            ValueError: If ``namespace`` contains the key separator.
        """
        if namespace and KEY_SEPARATOR in namespace:
            raise ValueError(f"namespace must not contain {KEY_SEPARATOR!r}: {namespace!r}")
        self._namespace = namespace
        self._hash_signatures = hash_signatures

    @property
    def namespace(self) -> str | None:
        return self._namespace

    def build(self, prefix: str, signature: str) -> str:
        """Build unique cache key for a request.

        Args:
            prefix: Resource prefix, e.g. ``"products_paginated"``.
            signature: Request path with optional query string.

        Returns:
            A unique string key for caching the response.
        """
        return str(self.build_key(prefix, signature))

    def build_key(self, prefix: str, signature: str) -> CacheKey:
        """Build the structured key, before it is flattened to a string."""
        normalized = normalize_signature(signature)
        if self._hash_signatures:
            normalized = hash_value(normalized)
        return CacheKey(prefix=prefix, signature=normalized, namespace=self._namespace)

    def pattern_for(self, prefix: str) -> str:
        """Build the glob pattern matching every key under ``prefix``.

        Args:
            prefix: Resource prefix. An empty prefix matches every key
                in the namespace.

        Returns:
            The invalidation pattern.
        """
        return CacheKey.pattern_for(prefix, namespace=self._namespace)
